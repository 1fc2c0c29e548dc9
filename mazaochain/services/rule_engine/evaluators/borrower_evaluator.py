"""Borrower rule evaluator for existing loan rules."""

from mazaochain.core.enums import LoanRuleType, LoanStatus
from mazaochain.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)

OPEN_LOAN_STATUSES = frozenset(
    {LoanStatus.PENDING, LoanStatus.APPROVED, LoanStatus.ACTIVE}
)


class BorrowerEvaluator(RuleEvaluator):
    """
    Evaluator for borrower-related rules.

    Handles:
    - NO_ACTIVE_LOAN: Farmer may not have a pending, approved or active loan
    """

    def evaluate(
        self, rule_type: LoanRuleType, context: EvaluationContext
    ) -> EvaluationResult:
        if rule_type != LoanRuleType.NO_ACTIVE_LOAN:
            raise self._unsupported(rule_type)

        open_loans = [
            loan_status
            for loan_status in context.existing_loan_statuses
            if loan_status in OPEN_LOAN_STATUSES
        ]
        passed = not open_loans

        return EvaluationResult(
            rule_type=LoanRuleType.NO_ACTIVE_LOAN,
            passed=passed,
            reason=(
                "No active or pending loan"
                if passed
                else "Borrower already has an active or pending loan"
            ),
            evidence={
                "open_loans": len(open_loans),
                "statuses": [loan_status.value for loan_status in open_loans],
            },
        )
