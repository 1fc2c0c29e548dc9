"""Rule engine foundation with evaluation context, results, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from mazaochain.core.enums import LoanRuleType, LoanStatus


@dataclass
class EvaluationContext:
    """
    Evaluation context containing the loan request data for rule evaluation.

    This context is passed to rule evaluators and contains all information
    needed to assess whether a farmer may take the requested loan.

    Attributes:
        borrower_id: Farmer requesting the loan
        requested_amount: Requested principal
        available_collateral: Total value of the farmer's collateral tokens
        collateral_token_count: Number of active collateral tokens
        existing_loan_statuses: Statuses of the farmer's existing loans
        repayment_period_months: Requested repayment term, if known
    """

    borrower_id: str
    requested_amount: float
    available_collateral: float
    collateral_token_count: int = 0
    existing_loan_statuses: list[LoanStatus] = field(default_factory=list)
    repayment_period_months: Optional[int] = None


@dataclass
class EvaluationResult:
    """
    Result of evaluating a single rule against a loan request.

    Attributes:
        rule_type: The rule that produced this result
        passed: Whether the rule evaluation passed
        reason: Human-readable explanation of the result
        evidence: Structured data showing actual vs. required values
    """

    rule_type: LoanRuleType
    passed: bool
    reason: Optional[str] = None
    evidence: dict = field(default_factory=dict)


class RuleEvaluator(ABC):
    """
    Abstract base class for rule evaluators using the Strategy pattern.

    Each concrete evaluator implements evaluation logic for one or more
    rule types (collateral, borrower history, loan terms).
    """

    @abstractmethod
    def evaluate(
        self, rule_type: LoanRuleType, context: EvaluationContext
    ) -> EvaluationResult:
        """
        Evaluate a rule against the provided context.

        Args:
            rule_type: The rule to evaluate
            context: EvaluationContext containing the loan request data

        Returns:
            EvaluationResult with pass/fail, reason, and evidence

        Raises:
            ValueError: If the evaluator cannot handle the rule type
        """
        pass

    def _unsupported(self, rule_type: LoanRuleType) -> ValueError:
        return ValueError(
            f"{type(self).__name__} cannot handle rule type: {rule_type.value}"
        )
