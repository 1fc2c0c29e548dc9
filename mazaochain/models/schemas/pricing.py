"""Pydantic schemas for crop prices and price trends."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mazaochain.core.enums import (
    CropType,
    PriceFeedSource,
    PriceReferenceSource,
    TrendDirection,
)


class CropPriceResponse(BaseModel):
    """Schema for an active crop price."""

    crop_type: CropType
    price: float
    currency: str
    source: PriceFeedSource
    updated_at: datetime
    source_reference: Optional[str] = None
    updated_by: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PriceHistoryResponse(BaseModel):
    """Schema for an archived crop price."""

    crop_type: CropType
    price: float
    currency: str
    source: PriceFeedSource
    recorded_at: datetime
    source_reference: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PriceTrendResponse(BaseModel):
    """Schema for a crop price trend."""

    crop_type: CropType
    current_price: float
    trend_direction: TrendDirection
    previous_price: Optional[float] = None
    change_percent: Optional[float] = None
    price_history: list[PriceHistoryResponse] = []

    model_config = ConfigDict(from_attributes=True)


class CropPriceReferenceResponse(BaseModel):
    """Schema for the reference price used in crop valuation."""

    crop_type: CropType
    current_price: float
    last_updated: Optional[datetime] = None
    source: PriceReferenceSource

    model_config = ConfigDict(from_attributes=True)


class PriceUpdateRequest(BaseModel):
    """Schema for a manual price update."""

    price: float = Field(..., gt=0, description="New price per kg")
    updated_by: str = Field(..., min_length=1)
    source_reference: Optional[str] = None
