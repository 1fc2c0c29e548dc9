"""Pydantic schemas for loan interest and repayment schedules."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mazaochain.core.enums import InstallmentStatus


class InterestCalculationRequest(BaseModel):
    """Schema for an interest calculation; the default rate applies when omitted."""

    principal: float = Field(..., gt=0)
    term_months: int = Field(..., gt=0, le=60)
    annual_rate: Optional[float] = Field(None, ge=0, le=1)


class InterestCalculationResponse(BaseModel):
    """Schema for an interest calculation."""

    principal: float
    annual_rate: float
    term_months: int
    monthly_payment: float
    total_interest: float
    total_amount: float

    model_config = ConfigDict(from_attributes=True)


class RepaymentScheduleRequest(InterestCalculationRequest):
    """Schema for building a repayment schedule."""

    start_date: Optional[date] = None


class RepaymentInstallmentResponse(BaseModel):
    """Schema for one installment of a repayment schedule."""

    installment_number: int
    due_date: date
    principal_amount: float
    interest_amount: float
    total_amount: float
    remaining_balance: float
    status: InstallmentStatus

    model_config = ConfigDict(from_attributes=True)
