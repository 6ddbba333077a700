import pytest

from lm63.models.header import Format
from lm63.standards.keywords import (
    ALLOWED_KEYWORDS_1991,
    ALLOWED_KEYWORDS_1995,
    ALLOWED_KEYWORDS_2002,
    MAX_KEYWORD_LENGTH,
    detect_version,
    is_keyword_allowed,
    missing_required_keywords,
)


def test_detect_version_exact_tokens():
    assert detect_version("IESNA91") is Format.LM63_1991
    assert detect_version("IESNA:LM-63-1995") is Format.LM63_1995
    assert detect_version("IESNA:LM-63-2002") is Format.LM63_2002
    assert detect_version("IESNA:LM-63-2019") is Format.UNKNOWN
    assert detect_version("iesna91") is Format.UNKNOWN


@pytest.mark.parametrize(
    "fmt,allowed",
    [
        (Format.LM63_1991, ALLOWED_KEYWORDS_1991),
        (Format.LM63_1995, ALLOWED_KEYWORDS_1995),
        (Format.LM63_2002, ALLOWED_KEYWORDS_2002),
    ],
)
def test_listed_keywords_allowed(fmt, allowed):
    for key in allowed:
        assert len(key) <= MAX_KEYWORD_LENGTH
        assert is_keyword_allowed(fmt, key)
    assert not is_keyword_allowed(fmt, "NOTAKEYWORD")


def test_date_renamed_in_2002():
    assert is_keyword_allowed(Format.LM63_1995, "DATE")
    assert not is_keyword_allowed(Format.LM63_2002, "DATE")
    assert is_keyword_allowed(Format.LM63_2002, "TESTDATE")
    assert is_keyword_allowed(Format.LM63_2002, "ISSUEDATE")
    assert is_keyword_allowed(Format.LM63_2002, "LAMPPOSITION")
    assert not is_keyword_allowed(Format.LM63_1995, "LAMPPOSITION")


def test_block_keywords_only_in_1995():
    assert not is_keyword_allowed(Format.LM63_1991, "BLOCK")
    assert is_keyword_allowed(Format.LM63_1995, "BLOCK")
    assert is_keyword_allowed(Format.LM63_1995, "ENDBLOCK")
    assert is_keyword_allowed(Format.LM63_1995, "NEARFIELD")
    assert not is_keyword_allowed(Format.LM63_1991, "NEARFIELD")


def test_user_keywords():
    assert not is_keyword_allowed(Format.LM63_1991, "_X")
    assert is_keyword_allowed(Format.LM63_1995, "_X")
    assert is_keyword_allowed(Format.LM63_2002, "_X")
    assert is_keyword_allowed(Format.LM63_1986, "ANYTHING")


def test_missing_required_keywords():
    assert missing_required_keywords(Format.LM63_1991, {"TEST": "1"}) == ["MANUFAC"]
    assert missing_required_keywords(Format.LM63_2002, {"TEST": "1", "MANUFAC": "A"}) == ["TESTLAB", "ISSUEDATE"]
    assert missing_required_keywords(Format.LM63_1995, {}) == []
    assert missing_required_keywords(Format.LM63_1986, {}) == []
