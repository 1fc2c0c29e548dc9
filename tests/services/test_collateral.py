"""
Unit tests for the collateral policy.

Coverage:
- assess_collateral(): ratio and 200% threshold
- Boundary at exactly 200%
- Zero loan amount handling
- Helper functions for required collateral and maximum loan
"""

import math

import pytest

from mazaochain.services.collateral import (
    MIN_COLLATERAL_RATIO_PERCENT,
    assess_collateral,
    calculate_collateral_ratio,
    is_valid_collateral_ratio,
    max_loan_amount,
    required_collateral,
)
from mazaochain.services.valuation import estimate_crop_value


class TestAssessCollateral:
    """Tests for collateral assessment."""

    @pytest.mark.parametrize(
        "collateral, loan",
        [(1000, 400), (1000, 600), (50, 100), (12345.67, 890.12)],
    )
    def test_ratio_formula(self, collateral, loan):
        """Should compute collateral / loan * 100."""
        assessment = assess_collateral(collateral, loan)

        assert assessment.ratio_percent == (collateral / loan) * 100
        assert assessment.collateral_value == collateral
        assert assessment.loan_amount == loan

    def test_eligible_iff_ratio_at_least_200(self):
        """Should tie eligibility to the 200% threshold."""
        for collateral, loan in [(1000, 400), (1000, 600), (300, 100), (100, 100)]:
            assessment = assess_collateral(collateral, loan)
            assert assessment.is_eligible == (assessment.ratio_percent >= 200)

    def test_exactly_at_threshold_is_eligible(self):
        """200 against 100 is exactly 200% and eligible."""
        assessment = assess_collateral(200, 100)

        assert assessment.ratio_percent == 200
        assert assessment.is_eligible is True

    def test_just_below_threshold_is_not_eligible(self):
        """199.99 against 100 is not eligible."""
        assert assess_collateral(199.99, 100).is_eligible is False

    def test_threshold_is_fixed(self):
        assert MIN_COLLATERAL_RATIO_PERCENT == 200

    def test_zero_loan_amount_does_not_raise(self):
        """Should follow float semantics instead of raising."""
        assert assess_collateral(100, 0).ratio_percent == math.inf
        assert assess_collateral(100, 0).is_eligible is True
        assert math.isnan(assess_collateral(0, 0).ratio_percent)
        assert assess_collateral(0, 0).is_eligible is False


class TestValuationToEligibility:
    """End-to-end scenarios from crop evaluation to eligibility."""

    def test_manioc_scenario_eligible(self):
        value = estimate_crop_value(2, 1000, 0.5)
        assessment = assess_collateral(value, 400)

        assert value == 1000
        assert assessment.ratio_percent == 250
        assert assessment.is_eligible is True

    def test_cafe_scenario_not_eligible(self):
        value = estimate_crop_value(1, 500, 2.0)
        assessment = assess_collateral(value, 600)

        assert value == 1000
        assert assessment.ratio_percent == pytest.approx(166.67, abs=0.01)
        assert assessment.is_eligible is False


class TestCollateralHelpers:
    """Tests for the collateral helper functions."""

    def test_calculate_collateral_ratio(self):
        assert calculate_collateral_ratio(500, 250) == 200

    def test_is_valid_collateral_ratio(self):
        assert is_valid_collateral_ratio(200) is True
        assert is_valid_collateral_ratio(199.999) is False

    def test_required_collateral_is_twice_the_loan(self):
        assert required_collateral(400) == 800

    def test_max_loan_is_half_the_collateral(self):
        assert max_loan_amount(1000) == 500
