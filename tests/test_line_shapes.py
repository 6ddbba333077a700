import pytest

from lm63.models.header import LineKind
from lm63.parser.lines import classify, match_keyword_line, match_tilt_line


@pytest.mark.parametrize(
    "line,expected",
    [
        ("TEST[abc]", ("TEST", "abc")),
        ("MANUFAC [Acme Lighting]", ("MANUFAC", "Acme Lighting")),
        ("[MANUFAC] Acme Lighting", ("MANUFAC", "Acme Lighting")),
        ("[BLOCK]", ("BLOCK", "")),
        ("[] empty", ("", "empty")),
    ],
)
def test_match_keyword_line(line, expected):
    assert match_keyword_line(line) == expected


@pytest.mark.parametrize(
    "line",
    ["Acme photometric report", "Luminaire model [X] rev 2", "free text [note]", "[not a key] text"],
)
def test_non_keyword_lines(line):
    assert match_keyword_line(line) is None
    assert classify(line) is LineKind.OTHER


def test_match_tilt_line():
    assert match_tilt_line("TILT=NONE") == "NONE"
    assert match_tilt_line("TILT  =  INCLUDE") == "INCLUDE"
    assert match_tilt_line("TILT=lamp.tlt") == "lamp.tlt"
    assert match_tilt_line("TILTED[x]") is None
    assert match_tilt_line("[TILT] NONE") is None


def test_tilt_shape_wins_over_keyword_shape():
    assert classify("TILT=odd[name]") is LineKind.TILT
    assert classify("[TEST] 1") is LineKind.KEYWORD
    assert classify("TILTED[x]") is LineKind.KEYWORD
