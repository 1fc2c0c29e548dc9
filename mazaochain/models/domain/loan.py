"""Loan terms domain models."""

from dataclasses import dataclass
from datetime import date

from mazaochain.core.enums import InstallmentStatus


@dataclass(frozen=True)
class InterestCalculation:
    """Amortised repayment figures for a loan."""

    principal: float
    annual_rate: float
    term_months: int
    monthly_payment: float
    total_interest: float
    total_amount: float


@dataclass(frozen=True)
class RepaymentInstallment:
    """One monthly installment of a repayment schedule."""

    installment_number: int
    due_date: date
    principal_amount: float
    interest_amount: float
    total_amount: float
    remaining_balance: float
    status: InstallmentStatus = InstallmentStatus.PENDING
