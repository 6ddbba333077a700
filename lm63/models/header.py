from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class Format(Enum):
    UNKNOWN = "UNKNOWN"
    LM63_1986 = "LM-63-1986"
    LM63_1991 = "LM-63-1991"
    LM63_1995 = "LM-63-1995"
    LM63_2002 = "LM-63-2002"


class TiltSpecification(Enum):
    UNSET = "UNSET"
    INCLUDE = "INCLUDE"
    FILE = "FILE"
    NONE = "NONE"


class LineKind(Enum):
    KEYWORD = "KEYWORD"
    TILT = "TILT"
    OTHER = "OTHER"


@dataclass
class IESHeader:
    """
    Everything an LM-63 file declares before its photometric block.

    `keywords` keeps declaration order. `lines_consumed` is the 1-based line
    number of the TILT line, so the photometric data starts on the next line.
    """
    format: Format
    tilt_specification: TiltSpecification
    tilt_filename: Optional[str] = None
    keywords: Dict[str, str] = field(default_factory=dict)
    standard_line: Optional[str] = None
    lines_consumed: int = 0
    keyword_lines: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "format": self.format.value,
            "standard_line": self.standard_line,
            "tilt": self.tilt_specification.value,
            "tilt_filename": self.tilt_filename,
            "keywords": dict(self.keywords),
            "lines_consumed": self.lines_consumed,
            "keyword_lines": dict(self.keyword_lines),
        }
