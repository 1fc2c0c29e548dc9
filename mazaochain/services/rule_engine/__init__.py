"""Rule engine for checking loan requests against eligibility rules."""

from .base import EvaluationContext, EvaluationResult, RuleEvaluator
from .engine import DEFAULT_RULES, RuleEngine

__all__ = [
    "DEFAULT_RULES",
    "EvaluationContext",
    "EvaluationResult",
    "RuleEngine",
    "RuleEvaluator",
]
