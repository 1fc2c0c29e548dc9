"""Rule engine orchestrator for loan eligibility checks."""

import logging
from typing import Dict, List

from mazaochain.core.enums import LoanRuleType
from mazaochain.models.domain.collateral import LoanEligibility
from mazaochain.services.collateral import (
    assess_collateral,
    max_loan_amount,
    required_collateral,
)
from mazaochain.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from mazaochain.services.rule_engine.evaluators import (
    BorrowerEvaluator,
    CollateralEvaluator,
    LoanEvaluator,
)

logger = logging.getLogger(__name__)

# Evaluation order; failure reasons are reported in this order.
DEFAULT_RULES = (
    LoanRuleType.COLLATERAL_RATIO,
    LoanRuleType.COLLATERAL_TOKENS,
    LoanRuleType.NO_ACTIVE_LOAN,
    LoanRuleType.REPAYMENT_TERM,
)


class RuleEngine:
    """
    Rule engine orchestrator for loan eligibility.

    This class:
    - Maintains a registry of rule evaluators
    - Runs every configured rule against a loan request
    - Combines the results into a LoanEligibility verdict
    """

    def __init__(self, rules: tuple[LoanRuleType, ...] = DEFAULT_RULES):
        """Initialize the rule engine with evaluator registry."""
        self._rules = rules
        self._evaluators: Dict[LoanRuleType, RuleEvaluator] = {}
        self._register_default_evaluators()

    def _register_default_evaluators(self):
        """Register default evaluators for all rule types."""
        collateral_evaluator = CollateralEvaluator()
        self._evaluators[LoanRuleType.COLLATERAL_RATIO] = collateral_evaluator
        self._evaluators[LoanRuleType.COLLATERAL_TOKENS] = collateral_evaluator

        self._evaluators[LoanRuleType.NO_ACTIVE_LOAN] = BorrowerEvaluator()
        self._evaluators[LoanRuleType.REPAYMENT_TERM] = LoanEvaluator()

    def register_evaluator(
        self, rule_type: LoanRuleType, evaluator: RuleEvaluator
    ) -> None:
        """
        Register a custom evaluator for a specific rule type.

        Args:
            rule_type: The rule type to handle
            evaluator: The evaluator instance
        """
        self._evaluators[rule_type] = evaluator

    def evaluate_rules(self, context: EvaluationContext) -> List[EvaluationResult]:
        """
        Evaluate every configured rule against a loan request.

        Raises:
            ValueError: If the request is invalid or a rule has no evaluator
        """
        self._validate_context(context)

        results = []
        for rule_type in self._rules:
            evaluator = self._evaluators.get(rule_type)
            if evaluator is None:
                raise ValueError(f"No evaluator registered for rule type: {rule_type.value}")
            results.append(evaluator.evaluate(rule_type, context))
        return results

    def check_eligibility(self, context: EvaluationContext) -> LoanEligibility:
        """
        Check whether a farmer may take the requested loan.

        Args:
            context: EvaluationContext describing the loan request

        Returns:
            LoanEligibility with collateral figures and failure reasons

        Raises:
            ValueError: If borrower_id is empty or requested_amount is not positive
        """
        logger.info(
            f"Checking loan eligibility for {context.borrower_id}: "
            f"requested {context.requested_amount}"
        )

        results = self.evaluate_rules(context)
        reasons = [result.reason for result in results if not result.passed]
        assessment = assess_collateral(
            context.available_collateral, context.requested_amount
        )

        eligibility = LoanEligibility(
            is_eligible=not reasons,
            max_loan_amount=max_loan_amount(context.available_collateral),
            available_collateral=context.available_collateral,
            collateral_ratio_percent=assessment.ratio_percent,
            required_collateral=required_collateral(context.requested_amount),
            reasons=reasons,
        )

        logger.info(
            f"Loan eligibility for {context.borrower_id}: "
            f"eligible={eligibility.is_eligible}, failed rules={len(reasons)}"
        )
        return eligibility

    @staticmethod
    def _validate_context(context: EvaluationContext) -> None:
        if not context.borrower_id:
            raise ValueError("Borrower ID is required")
        if not context.requested_amount > 0:
            raise ValueError("Requested amount must be positive")
