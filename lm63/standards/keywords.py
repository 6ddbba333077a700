"""
Keyword rules of the IESNA LM-63 revisions.

Each revision after 1986 publishes a closed list of keywords. Later lists
extend the earlier ones with a few renames: 1995 adds NEARFIELD, OTHER,
SEARCH and the BLOCK/ENDBLOCK pair, 2002 replaces DATE by TESTDATE/ISSUEDATE,
adds TESTLAB and LAMPPOSITION and drops the block pair. LM-63-1986 files have
free-form text headers, so no keyword is checked for them.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional

from lm63.models.header import Format


MAX_KEYWORD_LENGTH = 18

USER_KEYWORD_PREFIX = "_"

VERSION_TOKENS: Dict[str, Format] = {
    "IESNA91": Format.LM63_1991,
    "IESNA:LM-63-1995": Format.LM63_1995,
    "IESNA:LM-63-2002": Format.LM63_2002,
}

ALLOWED_KEYWORDS_1991: FrozenSet[str] = frozenset({
    "TEST",
    "DATE",
    "MANUFAC",
    "LUMCAT",
    "LUMINAIRE",
    "LAMPCAT",
    "LAMP",
    "BALLAST",
    "BALLASTCAT",
    "MAINTCAT",
    "DISTRIBUTION",
    "FLASHAREA",
    "COLORCONSTANT",
    "MORE",
})

ALLOWED_KEYWORDS_1995: FrozenSet[str] = ALLOWED_KEYWORDS_1991 | {
    "NEARFIELD",
    "OTHER",
    "SEARCH",
    "BLOCK",
    "ENDBLOCK",
}

ALLOWED_KEYWORDS_2002: FrozenSet[str] = (ALLOWED_KEYWORDS_1995 - {"DATE", "BLOCK", "ENDBLOCK"}) | {
    "TESTLAB",
    "TESTDATE",
    "ISSUEDATE",
    "LAMPPOSITION",
}

ALLOWED_KEYWORDS: Dict[Format, FrozenSet[str]] = {
    Format.LM63_1991: ALLOWED_KEYWORDS_1991,
    Format.LM63_1995: ALLOWED_KEYWORDS_1995,
    Format.LM63_2002: ALLOWED_KEYWORDS_2002,
}

REQUIRED_KEYWORDS: Dict[Format, tuple] = {
    Format.LM63_1986: (),
    Format.LM63_1991: ("TEST", "MANUFAC"),
    Format.LM63_1995: (),
    Format.LM63_2002: ("TEST", "TESTLAB", "ISSUEDATE", "MANUFAC"),
}

STANDARD_LABELS: Dict[Format, str] = {
    Format.LM63_1986: "IESNA LM-63-1986",
    Format.LM63_1991: "IESNA LM-63-91",
    Format.LM63_1995: "IESNA LM-63-95",
    Format.LM63_2002: "IESNA LM-63-2002",
}


def detect_version(line: str) -> Format:
    return VERSION_TOKENS.get(line, Format.UNKNOWN)


def is_user_keyword(key: str) -> bool:
    return key.startswith(USER_KEYWORD_PREFIX)


def allows_user_keywords(fmt: Format) -> bool:
    return fmt in (Format.LM63_1995, Format.LM63_2002)


def is_keyword_allowed(fmt: Format, key: str) -> bool:
    """True when `key` may appear in a file of standard `fmt` (length aside)."""
    if fmt in (Format.LM63_1986, Format.UNKNOWN):
        return True
    if is_user_keyword(key):
        return allows_user_keywords(fmt)
    return key in ALLOWED_KEYWORDS[fmt]


def required_keywords(fmt: Format) -> tuple:
    return REQUIRED_KEYWORDS.get(fmt, ())


def missing_required_keywords(fmt: Format, keywords) -> list:
    return [k for k in required_keywords(fmt) if k not in keywords]


def standard_label(fmt: Format) -> Optional[str]:
    return STANDARD_LABELS.get(fmt)
