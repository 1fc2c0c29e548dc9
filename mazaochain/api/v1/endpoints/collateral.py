"""Collateral assessment and loan eligibility endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from mazaochain.deps import get_rule_engine
from mazaochain.models.schemas.collateral import (
    CollateralAssessmentRequest,
    CollateralAssessmentResponse,
    LoanEligibilityRequest,
    LoanEligibilityResponse,
)
from mazaochain.services.collateral import assess_collateral
from mazaochain.services.rule_engine import EvaluationContext, RuleEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/assess",
    response_model=CollateralAssessmentResponse,
    summary="Assess collateral ratio",
    description="Compute the collateral ratio and check the 200% minimum",
)
async def assess(request: CollateralAssessmentRequest) -> CollateralAssessmentResponse:
    """Assess a collateral value against a requested loan amount."""
    assessment = assess_collateral(request.collateral_value, request.loan_amount)
    return CollateralAssessmentResponse.model_validate(assessment)


@router.post(
    "/eligibility",
    response_model=LoanEligibilityResponse,
    summary="Check loan eligibility",
    description="Run every loan eligibility rule against a loan request",
)
async def check_eligibility(
    request: LoanEligibilityRequest,
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
) -> LoanEligibilityResponse:
    """
    Check whether a farmer may take the requested loan.

    Rules checked:
    - Collateral covers 200% of the requested amount
    - At least one collateral token is held
    - No pending, approved or active loan exists
    - Repayment term is within bounds
    """
    try:
        eligibility = engine.check_eligibility(
            EvaluationContext(**request.model_dump())
        )
        return LoanEligibilityResponse.model_validate(eligibility)

    except ValueError as e:
        logger.error(f"Validation error checking eligibility: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error checking loan eligibility: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to check loan eligibility",
        )
