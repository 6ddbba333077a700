"""
Keyword rules for parsed LM-63 headers.

These run on a header that already parsed, so they report what a lenient
parse let through rather than failing it.
"""

from __future__ import annotations

from typing import List

from lm63.models.header import IESHeader
from lm63.models.validation import ValidationFinding
from lm63.standards.keywords import missing_required_keywords, standard_label


class RuleMissingRequiredKeywords:
    """Check for keywords the file's standard declares mandatory."""
    id = "LM63_KW_REQUIRED"

    def evaluate(self, header: IESHeader) -> List[ValidationFinding]:
        missing = missing_required_keywords(header.format, header.keywords)
        if not missing:
            return []
        return [ValidationFinding(
            id=self.id,
            severity="WARN",
            title="Missing required keywords",
            message=f"{standard_label(header.format)} requires these keywords: {', '.join(missing)}",
            evidence={"missing_keywords": missing, "format": header.format.value},
            line_refs=[header.lines_consumed],
            suggested_fix="Add the missing keywords before the TILT line.",
        )]


class RuleMissingRecommendedKeywords:
    """Check for keywords that identify the luminaire."""
    id = "LM63_KW_RECOMMENDED"

    RECOMMENDED_KEYWORDS = ["MANUFAC", "LUMCAT", "LUMINAIRE"]

    def evaluate(self, header: IESHeader) -> List[ValidationFinding]:
        missing = [k for k in self.RECOMMENDED_KEYWORDS if k not in header.keywords]
        if not missing:
            return []
        return [ValidationFinding(
            id=self.id,
            severity="INFO",
            title="Missing recommended keywords",
            message=f"The following recommended keywords are missing: {', '.join(missing)}",
            evidence={"missing_keywords": missing},
            line_refs=[],
            suggested_fix="Add missing keywords for better file identification.",
        )]


class RuleMultilineValues:
    id = "LM63_KW_MORE"

    def evaluate(self, header: IESHeader) -> List[ValidationFinding]:
        continued = [k for k, v in header.keywords.items() if "\n" in v]
        if not continued:
            return []
        return [ValidationFinding(
            id=self.id,
            severity="INFO",
            title="Keywords continued with MORE",
            message=f"Values continued over several lines: {', '.join(continued)}",
            evidence={"keywords": continued},
            line_refs=[header.keyword_lines[k] for k in continued if k in header.keyword_lines],
        )]
