from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional


Severity = Literal["ERROR", "WARN", "INFO"]


@dataclass(frozen=True)
class ValidationFinding:
    id: str
    severity: Severity
    title: str
    message: str
    evidence: Dict[str, Any]
    line_refs: List[int]
    suggested_fix: Optional[str] = None


@dataclass(frozen=True)
class ValidationReport:
    findings: List[ValidationFinding]

    @property
    def summary(self) -> Dict[str, int]:
        errors = sum(1 for f in self.findings if f.severity == "ERROR")
        warns = sum(1 for f in self.findings if f.severity == "WARN")
        info = sum(1 for f in self.findings if f.severity == "INFO")
        return {"errors": errors, "warnings": warns, "info": info}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "findings": [
                {
                    "id": f.id,
                    "severity": f.severity,
                    "title": f.title,
                    "message": f.message,
                    "evidence": f.evidence,
                    "line_refs": list(f.line_refs),
                    "suggested_fix": f.suggested_fix,
                }
                for f in self.findings
            ],
        }
