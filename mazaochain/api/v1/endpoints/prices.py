"""Crop price oracle endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mazaochain.core.enums import CropType
from mazaochain.deps import get_price_oracle
from mazaochain.models.schemas.pricing import (
    CropPriceReferenceResponse,
    CropPriceResponse,
    PriceHistoryResponse,
    PriceTrendResponse,
    PriceUpdateRequest,
)
from mazaochain.services.price_oracle import PriceOracleService

logger = logging.getLogger(__name__)

router = APIRouter()

PriceOracle = Annotated[PriceOracleService, Depends(get_price_oracle)]


@router.get(
    "",
    response_model=list[CropPriceResponse],
    summary="List current prices",
)
async def list_current_prices(oracle: PriceOracle) -> list[CropPriceResponse]:
    """List the active price of every crop, most recently updated first."""
    return [CropPriceResponse.model_validate(price) for price in oracle.get_current_prices()]


@router.get(
    "/trends",
    response_model=list[PriceTrendResponse],
    summary="List price trends",
)
async def list_price_trends(oracle: PriceOracle) -> list[PriceTrendResponse]:
    """List the latest price movement of every crop with a price."""
    return [PriceTrendResponse.model_validate(trend) for trend in oracle.get_all_price_trends()]


@router.get(
    "/oracle/status",
    summary="Automated oracle status",
)
async def oracle_status(oracle: PriceOracle) -> dict:
    """Report whether an automated price feed is connected."""
    return oracle.chainlink_integration_status()


@router.get(
    "/{crop_type}",
    response_model=CropPriceResponse,
    summary="Get current price",
)
async def get_current_price(crop_type: CropType, oracle: PriceOracle) -> CropPriceResponse:
    """Get the active price of a crop."""
    price = oracle.get_current_price(crop_type)

    if not price:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Current price not found for {crop_type.value}",
        )

    return CropPriceResponse.model_validate(price)


@router.put(
    "/{crop_type}",
    response_model=CropPriceResponse,
    summary="Update price",
    description="Manually set the price of a crop; large changes are rejected",
)
async def update_price(
    crop_type: CropType,
    request: PriceUpdateRequest,
    oracle: PriceOracle,
) -> CropPriceResponse:
    """
    Update the price of a crop.

    The new price must lie within the configured bounds and may not move
    more than the configured percentage from the current price.
    """
    if oracle.get_current_price(crop_type) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Current price not found for {crop_type.value}",
        )

    try:
        price = oracle.update_price(
            crop_type,
            request.price,
            updated_by=request.updated_by,
            source_reference=request.source_reference,
        )
        return CropPriceResponse.model_validate(price)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error updating price for {crop_type.value}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update price",
        )


@router.get(
    "/{crop_type}/history",
    response_model=list[PriceHistoryResponse],
    summary="Get price history",
)
async def get_price_history(
    crop_type: CropType,
    oracle: PriceOracle,
    limit: int = Query(30, ge=1, le=100, description="Maximum entries to return"),
) -> list[PriceHistoryResponse]:
    """Get archived prices of a crop, newest first."""
    return [
        PriceHistoryResponse.model_validate(entry)
        for entry in oracle.get_price_history(crop_type, limit=limit)
    ]


@router.get(
    "/{crop_type}/trend",
    response_model=PriceTrendResponse,
    summary="Get price trend",
)
async def get_price_trend(crop_type: CropType, oracle: PriceOracle) -> PriceTrendResponse:
    """Get the latest price movement of a crop."""
    try:
        return PriceTrendResponse.model_validate(oracle.get_price_trend(crop_type))

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error getting price trend for {crop_type.value}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get price trend",
        )


@router.get(
    "/{crop_type}/reference",
    response_model=CropPriceReferenceResponse,
    summary="Get valuation reference price",
)
async def get_price_reference(
    crop_type: CropType, oracle: PriceOracle
) -> CropPriceReferenceResponse:
    """Get the reference price crop valuation would use for a crop."""
    return CropPriceReferenceResponse.model_validate(oracle.get_price_reference(crop_type))
