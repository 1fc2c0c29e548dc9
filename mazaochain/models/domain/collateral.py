"""Collateral assessment and loan eligibility domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CollateralAssessment:
    """
    Collateral ratio for one loan request.

    Attributes:
        collateral_value: Value pledged against the loan
        loan_amount: Requested loan amount
        ratio_percent: collateral_value / loan_amount * 100
        is_eligible: Whether the ratio meets the minimum collateralization
    """

    collateral_value: float
    loan_amount: float
    ratio_percent: float
    is_eligible: bool


@dataclass(frozen=True)
class LoanEligibility:
    """
    Outcome of the full loan eligibility check.

    Attributes:
        is_eligible: True only when every rule passed
        max_loan_amount: Largest amount the available collateral can back
        available_collateral: Total collateral value held by the borrower
        collateral_ratio_percent: Collateral ratio for the requested amount
        required_collateral: Collateral needed for the requested amount
        reasons: Failure reasons in rule order (empty when eligible)
    """

    is_eligible: bool
    max_loan_amount: float
    available_collateral: float
    collateral_ratio_percent: float
    required_collateral: float
    reasons: list[str] = field(default_factory=list)
