"""Collateral policy: collateral ratio and minimum collateralization."""

import math

from mazaochain.models.domain.collateral import CollateralAssessment

# Collateral must be worth at least twice the loan.
MIN_COLLATERAL_RATIO_PERCENT = 200


def _divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 results for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def calculate_collateral_ratio(collateral_value: float, loan_amount: float) -> float:
    """Collateral value as a percentage of the loan amount."""
    return _divide(collateral_value, loan_amount) * 100


def is_valid_collateral_ratio(ratio_percent: float) -> bool:
    """Whether a collateral ratio meets the 200% minimum."""
    return ratio_percent >= MIN_COLLATERAL_RATIO_PERCENT


def assess_collateral(collateral_value: float, loan_amount: float) -> CollateralAssessment:
    """
    Assess a collateral value against a requested loan amount.

    No validation is performed. A zero loan amount yields an infinite or
    NaN ratio rather than an exception.
    """
    ratio_percent = calculate_collateral_ratio(collateral_value, loan_amount)
    return CollateralAssessment(
        collateral_value=collateral_value,
        loan_amount=loan_amount,
        ratio_percent=ratio_percent,
        is_eligible=is_valid_collateral_ratio(ratio_percent),
    )


def required_collateral(loan_amount: float) -> float:
    """Collateral needed to back a loan amount at the minimum ratio."""
    return loan_amount * MIN_COLLATERAL_RATIO_PERCENT / 100


def max_loan_amount(collateral_value: float) -> float:
    """Largest loan a collateral value can back at the minimum ratio."""
    return collateral_value * 100 / MIN_COLLATERAL_RATIO_PERCENT
