"""Crop price domain models for the price oracle."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from mazaochain.core.enums import (
    CropType,
    PriceFeedSource,
    PriceReferenceSource,
    TrendDirection,
)


@dataclass(frozen=True)
class CropPriceReference:
    """Reference price consumed by crop valuation."""

    crop_type: CropType
    current_price: float
    last_updated: Optional[datetime]
    source: PriceReferenceSource


@dataclass(frozen=True)
class CropPrice:
    """Active price record for a crop."""

    crop_type: CropType
    price: float
    currency: str
    source: PriceFeedSource
    updated_at: datetime
    source_reference: Optional[str] = None
    updated_by: Optional[str] = None


@dataclass(frozen=True)
class PriceHistoryEntry:
    """A price that was active until it was replaced."""

    crop_type: CropType
    price: float
    currency: str
    source: PriceFeedSource
    recorded_at: datetime
    source_reference: Optional[str] = None


@dataclass(frozen=True)
class PriceTrend:
    """Latest price movement for a crop, history newest first."""

    crop_type: CropType
    current_price: float
    trend_direction: TrendDirection
    previous_price: Optional[float] = None
    change_percent: Optional[float] = None
    price_history: list[PriceHistoryEntry] = field(default_factory=list)


@dataclass(frozen=True)
class PriceUpdateValidation:
    """Result of checking a proposed price update."""

    valid: bool
    message: Optional[str] = None
