from __future__ import annotations

from typing import List

from lm63.models.header import Format, IESHeader, TiltSpecification
from lm63.models.validation import ValidationFinding


class RuleStandardVersion:
    """Check the IES standard version."""
    id = "LM63_STD_VERSION"

    def evaluate(self, header: IESHeader) -> List[ValidationFinding]:
        if header.standard_line is None:
            return [ValidationFinding(
                id=self.id,
                severity="INFO",
                title="No standard header line",
                message="File does not begin with an IESNA version line and was read as LM-63-1986.",
                evidence={"format": header.format.value},
                line_refs=[1],
                suggested_fix="Consider re-exporting with a modern photometry tool.",
            )]

        if header.format in (Format.LM63_1991, Format.LM63_1995):
            return [ValidationFinding(
                id=self.id,
                severity="INFO",
                title="Older IES standard version",
                message=f"File uses older standard: {header.standard_line}. "
                        f"Consider updating to LM-63-2002.",
                evidence={"standard_line": header.standard_line},
                line_refs=[1],
            )]
        return []


class RuleTiltInclude:
    id = "LM63_TILT_INCLUDE"

    def evaluate(self, header: IESHeader) -> List[ValidationFinding]:
        if header.tilt_specification is not TiltSpecification.INCLUDE:
            return []
        return [ValidationFinding(
            id=self.id,
            severity="INFO",
            title="Tilt data included",
            message="TILT=INCLUDE: lamp tilt factors follow the TILT line, before the photometric data.",
            evidence={"tilt": header.tilt_specification.value},
            line_refs=[header.lines_consumed],
        )]
