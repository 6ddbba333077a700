from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, TextIO

from lm63.models.header import Format, IESHeader, LineKind, TiltSpecification
from lm63.parser.errors import IESError, ParseError, UnsupportedFeatureError
from lm63.parser.lines import classify, match_keyword_line, match_tilt_line
from lm63.parser.options import DEFAULT_OPTIONS, ParserOptions
from lm63.standards.keywords import (
    MAX_KEYWORD_LENGTH,
    detect_version,
    is_keyword_allowed,
    is_user_keyword,
    missing_required_keywords,
    standard_label,
)

logger = logging.getLogger(__name__)

MORE_KEYWORD = "MORE"
BLOCK_KEYWORD = "BLOCK"
ENDBLOCK_KEYWORD = "ENDBLOCK"


@dataclass
class ParserState:
    format: Format = Format.UNKNOWN
    tilt_specification: TiltSpecification = TiltSpecification.UNSET
    tilt_filename: Optional[str] = None
    keywords: Dict[str, str] = field(default_factory=dict)
    # Key of the entry a MORE line continues; None until a keyword is stored.
    last_inserted_key: Optional[str] = None
    inside_block: bool = False
    line_counter: int = 0
    standard_line: Optional[str] = None
    keyword_lines: Dict[str, int] = field(default_factory=dict)


# ─── Line reader ──────────────────────────────────────────────────────────────

def read_line(stream: TextIO, state: ParserState) -> Optional[str]:
    """Read one raw line without its terminator. Returns None at end of input."""
    state.line_counter += 1
    raw = stream.readline()
    if raw == "":
        return None
    return raw.rstrip("\r\n")


def read_trimmed_line(stream: TextIO, state: ParserState, options: ParserOptions) -> Optional[str]:
    """
    Read the next line with surrounding whitespace removed.

    With `ignore_empty_lines` blank lines are skipped; each of them still
    advances the line counter.
    """
    while True:
        raw = read_line(stream, state)
        if raw is None:
            return None
        line = raw.strip()
        if line or not options.ignore_empty_lines:
            return line


def expect_content(line: Optional[str], state: ParserState) -> str:
    if line is None:
        raise ParseError("Unexpected end of file", line_no=state.line_counter)
    if line == "":
        raise ParseError("Empty line is not expected", line_no=state.line_counter)
    return line


def _next_line(stream: TextIO, state: ParserState, options: ParserOptions) -> str:
    return expect_content(read_trimmed_line(stream, state, options), state)


# ─── Keyword lines ────────────────────────────────────────────────────────────

def check_keyword_length(state: ParserState, key: str) -> None:
    if len(key) > MAX_KEYWORD_LENGTH:
        raise ParseError(
            f"Keyword {key} exceeds maximum length of {MAX_KEYWORD_LENGTH} characters "
            f"specified by IESNA standard",
            line_no=state.line_counter,
        )


def accept_keyword(state: ParserState, key: str) -> None:
    """Check that the standard of the file allows `key`."""
    assert state.format is not Format.UNKNOWN

    check_keyword_length(state, key)
    label = standard_label(state.format)
    if state.format is Format.LM63_1991 and is_user_keyword(key):
        raise ParseError(f"User keywords are not allowed by {label} standard", line_no=state.line_counter)
    if not is_keyword_allowed(state.format, key):
        raise ParseError(f"Keyword {key} is not allowed by {label} standard", line_no=state.line_counter)


def process_block_keyword(state: ParserState, key: str, options: ParserOptions) -> None:
    if key not in (BLOCK_KEYWORD, ENDBLOCK_KEYWORD):
        return
    if not options.ignore_blocks:
        raise UnsupportedFeatureError("Block support is not implemented", line_no=state.line_counter)

    if key == BLOCK_KEYWORD:
        if state.inside_block:
            raise ParseError("BLOCK keyword is not expected", line_no=state.line_counter)
        state.inside_block = True
        logger.debug("Line %d: entering BLOCK", state.line_counter)
    else:
        if not state.inside_block:
            raise ParseError("ENDBLOCK keyword is not expected", line_no=state.line_counter)
        state.inside_block = False
        logger.debug("Line %d: leaving BLOCK", state.line_counter)


def handle_keyword_line(state: ParserState, line: str, options: ParserOptions) -> None:
    found = match_keyword_line(line)
    if found is None:
        raise ParseError("Keyword is expected", line_no=state.line_counter, snippet=line)
    key, value = found

    if not key:
        raise ParseError("Keyword is empty", line_no=state.line_counter, snippet=line)
    if not options.ignore_allowed_keywords:
        accept_keyword(state, key)
    elif options.restrict_keyword_length:
        check_keyword_length(state, key)

    process_block_keyword(state, key, options)

    if key == MORE_KEYWORD:
        if state.last_inserted_key is None:
            raise ParseError(
                "Keyword MORE occurred before any other keyword",
                line_no=state.line_counter,
                snippet=line,
            )
        state.keywords[state.last_inserted_key] += "\n" + value
        logger.debug("Line %d: continued keyword %s", state.line_counter, state.last_inserted_key)
    else:
        state.keywords[key] = value
        state.last_inserted_key = key
        state.keyword_lines[key] = state.line_counter


# ─── TILT line ────────────────────────────────────────────────────────────────

def handle_tilt_line(state: ParserState, line: str) -> None:
    value = match_tilt_line(line)
    if value is None:
        raise ParseError("TILT line is expected", line_no=state.line_counter, snippet=line)

    if value == "INCLUDE":
        state.tilt_specification = TiltSpecification.INCLUDE
    elif value == "NONE":
        state.tilt_specification = TiltSpecification.NONE
    elif not value:
        raise ParseError("TILT specification is empty", line_no=state.line_counter, snippet=line)
    else:
        # TODO: resolve FILE references once tilt data files can be loaded here.
        raise UnsupportedFeatureError(
            f"TILT specification from file is not supported ({value})",
            line_no=state.line_counter,
            snippet=line,
        )
    logger.debug("Line %d: TILT=%s", state.line_counter, state.tilt_specification.value)


def check_required_keywords(state: ParserState) -> None:
    missing = missing_required_keywords(state.format, state.keywords)
    if missing:
        raise ParseError(
            f"Required keywords missing for {standard_label(state.format)} standard: {', '.join(missing)}",
            line_no=state.line_counter,
        )


# ─── Entry points ─────────────────────────────────────────────────────────────

def parse_ies_header(stream: TextIO, options: Optional[ParserOptions] = None) -> IESHeader:
    """
    Parse the version line, keyword lines and TILT line of an LM-63 stream.

    Reading stops right after the TILT line, so `stream` is left at the start
    of the photometric data block.
    """
    options = options or DEFAULT_OPTIONS
    state = ParserState()

    line = _next_line(stream, state, options)
    state.format = detect_version(line)
    if state.format is Format.UNKNOWN:
        # No header token: LM-63-1986, and the first line already belongs to the body.
        state.format = Format.LM63_1986
        logger.debug("No version line, reading as %s", standard_label(state.format))
    else:
        state.standard_line = line
        logger.debug("Detected %s", standard_label(state.format))
        line = _next_line(stream, state, options)

    while True:
        kind = classify(line)
        if kind is LineKind.KEYWORD:
            handle_keyword_line(state, line, options)
        elif kind is LineKind.TILT:
            handle_tilt_line(state, line)
            break
        elif state.format is Format.LM63_1986:
            logger.debug("Line %d: skipping free-form header text", state.line_counter)
        else:
            raise ParseError("Expected keyword line or TILT line", line_no=state.line_counter, snippet=line)
        line = _next_line(stream, state, options)

    if state.inside_block:
        raise ParseError("BLOCK is not closed before TILT line", line_no=state.line_counter)
    if not options.ignore_required_keywords:
        check_required_keywords(state)

    return IESHeader(
        format=state.format,
        tilt_specification=state.tilt_specification,
        tilt_filename=state.tilt_filename,
        keywords=state.keywords,
        standard_line=state.standard_line,
        lines_consumed=state.line_counter,
        keyword_lines=state.keyword_lines,
    )


def parse_ies_text(
    text: str,
    options: Optional[ParserOptions] = None,
    source_path: str | Path | None = None,
) -> IESHeader:
    src = Path(source_path).expanduser().resolve() if source_path is not None else None
    try:
        return parse_ies_header(io.StringIO(text), options)
    except IESError as e:
        if e.filename is None and src is not None:
            e.filename = str(src)
        raise


def parse_ies_file(path: str | Path, options: Optional[ParserOptions] = None) -> IESHeader:
    p = Path(path).expanduser().resolve()
    with p.open("r", encoding="utf-8", errors="replace") as f:
        try:
            return parse_ies_header(f, options)
        except IESError as e:
            if e.filename is None:
                e.filename = str(p)
            raise
