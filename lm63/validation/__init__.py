"""
LM-63 Validation Module

Validation engine and lint rules for parsed LM-63 headers.
"""

from lm63.validation.engine import Validator, Rule
from lm63.validation.defaults import default_validator, minimal_validator
from lm63.models.validation import ValidationFinding, ValidationReport

__all__ = [
    "Validator",
    "Rule",
    "ValidationFinding",
    "ValidationReport",
    "default_validator",
    "minimal_validator",
]
