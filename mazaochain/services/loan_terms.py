"""Loan terms: amortised interest and monthly repayment schedules."""

from datetime import date, timedelta
from typing import List

from mazaochain.models.domain.loan import InterestCalculation, RepaymentInstallment

# Installments fall due every 30 days.
INSTALLMENT_INTERVAL_DAYS = 30


def _monthly_payment(principal: float, monthly_rate: float, term_months: int) -> float:
    if monthly_rate == 0:
        return principal / term_months
    growth = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * growth / (growth - 1)


def calculate_interest(
    principal: float,
    annual_rate: float,
    term_months: int,
) -> InterestCalculation:
    """
    Calculate the amortised monthly payment and total interest of a loan.

    Args:
        principal: Loan principal
        annual_rate: Annual interest rate as a fraction (0.12 for 12%)
        term_months: Number of monthly installments

    Returns:
        InterestCalculation with monthly payment, total interest and total amount

    Raises:
        ValueError: If term_months is not positive
    """
    if term_months <= 0:
        raise ValueError("Loan term must be at least one month")

    monthly_payment = _monthly_payment(principal, annual_rate / 12, term_months)
    total_amount = monthly_payment * term_months

    return InterestCalculation(
        principal=principal,
        annual_rate=annual_rate,
        term_months=term_months,
        monthly_payment=monthly_payment,
        total_interest=total_amount - principal,
        total_amount=total_amount,
    )


def build_repayment_schedule(
    principal: float,
    annual_rate: float,
    term_months: int,
    start_date: date,
) -> List[RepaymentInstallment]:
    """
    Build the monthly repayment schedule of an amortised loan.

    Each installment pays the interest accrued on the remaining balance and
    the rest of the monthly payment goes to principal. The last installment
    clears whatever balance is left.

    Raises:
        ValueError: If term_months is not positive
    """
    calculation = calculate_interest(principal, annual_rate, term_months)
    monthly_rate = annual_rate / 12

    schedule = []
    balance = principal
    for number in range(1, term_months + 1):
        interest = balance * monthly_rate
        if number == term_months:
            principal_part = balance
        else:
            principal_part = calculation.monthly_payment - interest
        balance = balance - principal_part

        schedule.append(
            RepaymentInstallment(
                installment_number=number,
                due_date=start_date + timedelta(days=INSTALLMENT_INTERVAL_DAYS * number),
                principal_amount=principal_part,
                interest_amount=interest,
                total_amount=principal_part + interest,
                remaining_balance=balance,
            )
        )

    return schedule
