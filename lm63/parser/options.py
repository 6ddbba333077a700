from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserOptions:
    # Apply the keyword length cap even when the allow-list check is skipped.
    restrict_keyword_length: bool = False
    # Accept any well-formed keyword regardless of the file's standard.
    ignore_allowed_keywords: bool = False
    # Skip the mandatory keyword check that runs after the TILT line.
    ignore_required_keywords: bool = True
    # Track BLOCK/ENDBLOCK as nesting markers instead of rejecting them.
    ignore_blocks: bool = False
    # Skip blank lines instead of treating them as a format violation.
    ignore_empty_lines: bool = True


DEFAULT_OPTIONS = ParserOptions()
