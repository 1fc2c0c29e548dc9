"""Pydantic schemas for collateral assessment and loan eligibility."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mazaochain.core.enums import LoanStatus


class CollateralAssessmentRequest(BaseModel):
    """Schema for assessing collateral against a loan amount."""

    collateral_value: float = Field(..., ge=0)
    loan_amount: float = Field(..., gt=0)


class CollateralAssessmentResponse(BaseModel):
    """Schema for a collateral assessment."""

    collateral_value: float
    loan_amount: float
    ratio_percent: float
    is_eligible: bool

    model_config = ConfigDict(from_attributes=True)


class LoanEligibilityRequest(BaseModel):
    """Schema for a full loan eligibility check."""

    borrower_id: str = Field(..., min_length=1)
    requested_amount: float = Field(..., gt=0)
    available_collateral: float = Field(..., ge=0)
    collateral_token_count: int = Field(0, ge=0)
    existing_loan_statuses: list[LoanStatus] = Field(default_factory=list)
    repayment_period_months: Optional[int] = None


class LoanEligibilityResponse(BaseModel):
    """Schema for a loan eligibility verdict."""

    is_eligible: bool
    max_loan_amount: float
    available_collateral: float
    collateral_ratio_percent: float
    required_collateral: float
    reasons: list[str] = []

    model_config = ConfigDict(from_attributes=True)
