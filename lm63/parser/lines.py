"""
Line shapes of an LM-63 header.

Two keyword shapes are recognised:

    [MANUFAC] Acme Lighting      tag first, value after it
    MANUFAC[Acme Lighting]       keyword first, value in the trailing bracket

and the TILT directive `TILT = <INCLUDE|NONE|filename>`. Lines are expected
to be trimmed already.
"""

from __future__ import annotations

from typing import Optional, Tuple

from lm63.models.header import LineKind


TILT_TOKEN = "TILT"


def _is_word(text: str) -> bool:
    return all(c.isalnum() or c == "_" for c in text)


def _match_leading_tag(line: str) -> Optional[Tuple[str, str]]:
    if not line.startswith("["):
        return None
    end = line.find("]")
    if end < 0:
        return None
    key = line[1:end]
    if not _is_word(key):
        return None
    return key, line[end + 1 :].strip()


def _match_trailing_tag(line: str) -> Optional[Tuple[str, str]]:
    if not line.endswith("]"):
        return None
    start = line.rfind("[", 0, len(line) - 1)
    if start < 0:
        return None
    key = line[:start].rstrip()
    value = line[start + 1 : -1]
    if not key or not _is_word(key) or "]" in value:
        return None
    return key, value.strip()


def match_keyword_line(line: str) -> Optional[Tuple[str, str]]:
    """Return (key, value) if `line` has a keyword shape, else None."""
    found = _match_leading_tag(line)
    if found is None:
        found = _match_trailing_tag(line)
    return found


def match_tilt_line(line: str) -> Optional[str]:
    """Return the text after `TILT=` if `line` is a TILT directive, else None."""
    if not line.startswith(TILT_TOKEN):
        return None
    rest = line[len(TILT_TOKEN) :].lstrip()
    if not rest.startswith("="):
        return None
    return rest[1:].strip()


def classify(line: str) -> LineKind:
    if match_tilt_line(line) is not None:
        return LineKind.TILT
    if match_keyword_line(line) is not None:
        return LineKind.KEYWORD
    return LineKind.OTHER
