"""Loan terms endpoints."""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, status

from mazaochain.config import settings
from mazaochain.models.schemas.loan import (
    InterestCalculationRequest,
    InterestCalculationResponse,
    RepaymentInstallmentResponse,
    RepaymentScheduleRequest,
)
from mazaochain.services.loan_terms import build_repayment_schedule, calculate_interest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/interest",
    response_model=InterestCalculationResponse,
    summary="Calculate loan interest",
)
async def calculate_loan_interest(
    request: InterestCalculationRequest,
) -> InterestCalculationResponse:
    """Calculate the amortised monthly payment and total interest of a loan."""
    annual_rate = (
        settings.DEFAULT_INTEREST_RATE if request.annual_rate is None else request.annual_rate
    )

    try:
        calculation = calculate_interest(request.principal, annual_rate, request.term_months)
        return InterestCalculationResponse.model_validate(calculation)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error calculating loan interest: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate loan interest",
        )


@router.post(
    "/schedule",
    response_model=list[RepaymentInstallmentResponse],
    summary="Build repayment schedule",
)
async def build_schedule(
    request: RepaymentScheduleRequest,
) -> list[RepaymentInstallmentResponse]:
    """Build the monthly repayment schedule of a loan starting today by default."""
    annual_rate = (
        settings.DEFAULT_INTEREST_RATE if request.annual_rate is None else request.annual_rate
    )
    start_date = request.start_date or date.today()

    try:
        schedule = build_repayment_schedule(
            request.principal, annual_rate, request.term_months, start_date
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error building repayment schedule: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to build repayment schedule",
        )

    logger.info(
        f"Built {len(schedule)}-installment schedule for principal {request.principal}"
    )
    return [RepaymentInstallmentResponse.model_validate(item) for item in schedule]
