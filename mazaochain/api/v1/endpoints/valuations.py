"""Crop valuation endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from mazaochain.deps import get_valuation_engine
from mazaochain.models.schemas.valuation import (
    CropEvaluationCreate,
    CropEvaluationResponse,
)
from mazaochain.services.valuation import ValuationEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/estimate",
    response_model=CropEvaluationResponse,
    summary="Estimate crop value",
    description="Value a crop evaluation as area x historical yield x reference price",
)
async def estimate_crop_value(
    evaluation: CropEvaluationCreate,
    engine: Annotated[ValuationEngine, Depends(get_valuation_engine)],
) -> CropEvaluationResponse:
    """
    Estimate the value of a farmer's crop evaluation.

    When no reference price is submitted, the current price from the price
    oracle is used, falling back to the default price for the crop.
    """
    try:
        result = engine.evaluate_submission(
            crop_type=evaluation.crop_type,
            area_hectares=evaluation.area_hectares,
            historical_yield=evaluation.historical_yield,
            reference_price=evaluation.reference_price,
        )
        return CropEvaluationResponse.model_validate(result)

    except ValueError as e:
        logger.error(f"Validation error estimating crop value: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error estimating crop value: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to estimate crop value",
        )
