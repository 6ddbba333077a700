from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from lm63.models.header import IESHeader
from lm63.models.validation import ValidationFinding, ValidationReport


class Rule(Protocol):
    id: str
    def evaluate(self, header: IESHeader) -> List[ValidationFinding]: ...


@dataclass
class Validator:
    rules: List[Rule]

    def run(self, header: IESHeader) -> ValidationReport:
        findings: List[ValidationFinding] = []
        for rule in self.rules:
            findings.extend(rule.evaluate(header))
        # stable ordering: severity then id
        sev_order = {"ERROR": 0, "WARN": 1, "INFO": 2}
        findings.sort(key=lambda f: (sev_order.get(f.severity, 99), f.id))
        return ValidationReport(findings=findings)
