from __future__ import annotations

from lm63.validation.engine import Validator
from lm63.validation.rules.keywords import (
    RuleMissingRecommendedKeywords,
    RuleMissingRequiredKeywords,
    RuleMultilineValues,
)
from lm63.validation.rules.standard import RuleStandardVersion, RuleTiltInclude


def default_validator() -> Validator:
    """Create validator with all default rules."""
    return Validator(
        rules=[
            # Warnings
            RuleMissingRequiredKeywords(),
            # Info
            RuleMissingRecommendedKeywords(),
            RuleStandardVersion(),
            RuleTiltInclude(),
            RuleMultilineValues(),
        ]
    )


def minimal_validator() -> Validator:
    """Create validator with only the mandatory keyword rule (for quick checks)."""
    return Validator(rules=[RuleMissingRequiredKeywords()])
