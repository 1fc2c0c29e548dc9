"""
Unit tests for the loan eligibility rule engine.

Coverage:
- RuleEngine.check_eligibility(): verdict, collateral figures, reasons
- Individual evaluators
- Input validation
"""

from dataclasses import replace

import pytest

from mazaochain.core.enums import LoanRuleType, LoanStatus
from mazaochain.services.rule_engine import (
    EvaluationResult,
    RuleEngine,
    RuleEvaluator,
)
from mazaochain.services.rule_engine.evaluators import (
    BorrowerEvaluator,
    CollateralEvaluator,
    LoanEvaluator,
)


class TestCheckEligibility:
    """Tests for the combined eligibility verdict."""

    def test_eligible_request(self, loan_context):
        """Should accept a request passing every rule."""
        eligibility = RuleEngine().check_eligibility(loan_context)

        assert eligibility.is_eligible is True
        assert eligibility.reasons == []
        assert eligibility.available_collateral == 1000
        assert eligibility.required_collateral == 800
        assert eligibility.max_loan_amount == 500
        assert eligibility.collateral_ratio_percent == 250

    def test_insufficient_collateral(self, loan_context):
        """Should reject when collateral is below 200% of the loan."""
        context = replace(loan_context, requested_amount=600.0)

        eligibility = RuleEngine().check_eligibility(context)

        assert eligibility.is_eligible is False
        assert len(eligibility.reasons) == 1
        assert "Insufficient collateral" in eligibility.reasons[0]
        assert eligibility.required_collateral == 1200

    def test_reasons_follow_rule_order(self, loan_context):
        """Should list every failure in rule order."""
        context = replace(
            loan_context,
            requested_amount=600.0,
            collateral_token_count=0,
            existing_loan_statuses=[LoanStatus.ACTIVE],
        )

        eligibility = RuleEngine().check_eligibility(context)

        assert eligibility.is_eligible is False
        assert eligibility.reasons == [
            "Insufficient collateral. Required: 1,200.00 USDC, available: 1,000.00 USDC",
            "No collateral tokens available",
            "Borrower already has an active or pending loan",
        ]

    def test_exact_threshold_is_eligible(self, loan_context):
        context = replace(loan_context, requested_amount=500.0)

        assert RuleEngine().check_eligibility(context).is_eligible is True

    @pytest.mark.parametrize("amount", [0, -100])
    def test_non_positive_amount_raises(self, loan_context, amount):
        """Should reject a non-positive requested amount."""
        with pytest.raises(ValueError, match="must be positive"):
            RuleEngine().check_eligibility(replace(loan_context, requested_amount=amount))

    def test_missing_borrower_raises(self, loan_context):
        with pytest.raises(ValueError, match="Borrower ID is required"):
            RuleEngine().check_eligibility(replace(loan_context, borrower_id=""))

    def test_custom_evaluator_replaces_default(self, loan_context):
        """Should use a registered evaluator for its rule type."""

        class AlwaysFail(RuleEvaluator):
            def evaluate(self, rule_type, context):
                return EvaluationResult(rule_type=rule_type, passed=False, reason="blocked")

        engine = RuleEngine()
        engine.register_evaluator(LoanRuleType.REPAYMENT_TERM, AlwaysFail())

        eligibility = engine.check_eligibility(loan_context)

        assert eligibility.is_eligible is False
        assert eligibility.reasons == ["blocked"]

    def test_rule_subset(self, loan_context):
        """Should only evaluate the configured rules."""
        engine = RuleEngine(rules=(LoanRuleType.COLLATERAL_RATIO,))
        context = replace(loan_context, collateral_token_count=0)

        results = engine.evaluate_rules(context)

        assert [result.rule_type for result in results] == [LoanRuleType.COLLATERAL_RATIO]
        assert engine.check_eligibility(context).is_eligible is True


class TestEvaluators:
    """Tests for the individual rule evaluators."""

    def test_collateral_ratio_evidence(self, loan_context):
        result = CollateralEvaluator().evaluate(LoanRuleType.COLLATERAL_RATIO, loan_context)

        assert result.passed is True
        assert result.evidence["actual"] == 250
        assert result.evidence["required"] == 200
        assert result.evidence["required_collateral"] == 800

    def test_collateral_evaluator_rejects_other_rules(self, loan_context):
        with pytest.raises(ValueError, match="cannot handle"):
            CollateralEvaluator().evaluate(LoanRuleType.NO_ACTIVE_LOAN, loan_context)

    @pytest.mark.parametrize(
        "statuses, passed",
        [
            ([], True),
            ([LoanStatus.REPAID, LoanStatus.REJECTED], True),
            ([LoanStatus.PENDING], False),
            ([LoanStatus.REPAID, LoanStatus.APPROVED], False),
        ],
    )
    def test_no_active_loan(self, loan_context, statuses, passed):
        context = replace(loan_context, existing_loan_statuses=statuses)

        result = BorrowerEvaluator().evaluate(LoanRuleType.NO_ACTIVE_LOAN, context)

        assert result.passed is passed

    @pytest.mark.parametrize(
        "term, passed",
        [(None, True), (1, True), (60, True), (0, False), (61, False)],
    )
    def test_repayment_term(self, loan_context, term, passed):
        context = replace(loan_context, repayment_period_months=term)

        result = LoanEvaluator().evaluate(LoanRuleType.REPAYMENT_TERM, context)

        assert result.passed is passed
