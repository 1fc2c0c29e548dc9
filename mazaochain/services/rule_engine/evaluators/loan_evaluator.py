"""Loan rule evaluator for repayment term rules."""

from mazaochain.core.enums import LoanRuleType
from mazaochain.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)

MIN_TERM_MONTHS = 1
MAX_TERM_MONTHS = 60


class LoanEvaluator(RuleEvaluator):
    """
    Evaluator for loan-related rules.

    Handles:
    - REPAYMENT_TERM: Repayment period between 1 and 60 months
    """

    def evaluate(
        self, rule_type: LoanRuleType, context: EvaluationContext
    ) -> EvaluationResult:
        if rule_type != LoanRuleType.REPAYMENT_TERM:
            raise self._unsupported(rule_type)

        term = context.repayment_period_months

        # No term requested yet, nothing to check
        if term is None:
            return EvaluationResult(
                rule_type=LoanRuleType.REPAYMENT_TERM,
                passed=True,
                reason="No repayment term requested",
                evidence={"actual": None},
            )

        passed = MIN_TERM_MONTHS <= term <= MAX_TERM_MONTHS

        if passed:
            reason = f"Repayment term {term} months is within {MIN_TERM_MONTHS}-{MAX_TERM_MONTHS} months"
        else:
            reason = f"Repayment term {term} months must be between {MIN_TERM_MONTHS} and {MAX_TERM_MONTHS} months"

        return EvaluationResult(
            rule_type=LoanRuleType.REPAYMENT_TERM,
            passed=passed,
            reason=reason,
            evidence={
                "actual": term,
                "min_months": MIN_TERM_MONTHS,
                "max_months": MAX_TERM_MONTHS,
            },
        )
