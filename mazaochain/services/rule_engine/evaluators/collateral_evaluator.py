"""Collateral rule evaluator for collateral ratio and token rules."""

from mazaochain.config import settings
from mazaochain.core.enums import LoanRuleType
from mazaochain.services.collateral import (
    MIN_COLLATERAL_RATIO_PERCENT,
    assess_collateral,
    required_collateral,
)
from mazaochain.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class CollateralEvaluator(RuleEvaluator):
    """
    Evaluator for collateral-related rules.

    Handles:
    - COLLATERAL_RATIO: Collateral must cover 200% of the requested amount
    - COLLATERAL_TOKENS: Farmer must hold at least one collateral token
    """

    def evaluate(
        self, rule_type: LoanRuleType, context: EvaluationContext
    ) -> EvaluationResult:
        if rule_type == LoanRuleType.COLLATERAL_RATIO:
            return self._evaluate_collateral_ratio(context)
        elif rule_type == LoanRuleType.COLLATERAL_TOKENS:
            return self._evaluate_collateral_tokens(context)
        else:
            raise self._unsupported(rule_type)

    def _evaluate_collateral_ratio(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate the minimum collateralization requirement.

        Args:
            context: EvaluationContext

        Returns:
            EvaluationResult with ratio evidence
        """
        assessment = assess_collateral(
            context.available_collateral, context.requested_amount
        )
        required = required_collateral(context.requested_amount)
        currency = settings.CURRENCY

        if assessment.is_eligible:
            reason = (
                f"Collateral ratio {assessment.ratio_percent:.2f}% meets minimum "
                f"of {MIN_COLLATERAL_RATIO_PERCENT}%"
            )
        else:
            reason = (
                f"Insufficient collateral. Required: {required:,.2f} {currency}, "
                f"available: {context.available_collateral:,.2f} {currency}"
            )

        return EvaluationResult(
            rule_type=LoanRuleType.COLLATERAL_RATIO,
            passed=assessment.is_eligible,
            reason=reason,
            evidence={
                "actual": assessment.ratio_percent,
                "required": MIN_COLLATERAL_RATIO_PERCENT,
                "required_collateral": required,
                "available_collateral": context.available_collateral,
            },
        )

    def _evaluate_collateral_tokens(self, context: EvaluationContext) -> EvaluationResult:
        passed = context.collateral_token_count > 0

        return EvaluationResult(
            rule_type=LoanRuleType.COLLATERAL_TOKENS,
            passed=passed,
            reason=(
                f"{context.collateral_token_count} collateral token(s) available"
                if passed
                else "No collateral tokens available"
            ),
            evidence={"actual": context.collateral_token_count, "required": 1},
        )
