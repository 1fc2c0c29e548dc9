"""Price oracle service for crop reference prices and price trends."""

import logging
import math
from typing import List, Optional, Sequence

from mazaochain.config import settings
from mazaochain.core.enums import (
    CropType,
    PriceFeedSource,
    PriceReferenceSource,
    TrendDirection,
)
from mazaochain.models.domain.pricing import (
    CropPrice,
    CropPriceReference,
    PriceHistoryEntry,
    PriceTrend,
    PriceUpdateValidation,
)
from mazaochain.repositories.price_repository import PriceRepository

logger = logging.getLogger(__name__)


def _change_percent(new_price: float, old_price: float) -> Optional[float]:
    """Relative change in percent, or None when the old price is zero."""
    if old_price == 0:
        return None
    return (new_price - old_price) / old_price * 100


def compute_price_trend(
    crop_type: CropType,
    current_price: float,
    history: Sequence[PriceHistoryEntry],
    threshold_percent: float = 1.0,
) -> PriceTrend:
    """
    Compare the current price with the most recent archived price.

    Args:
        crop_type: Crop the prices belong to
        current_price: Active price
        history: Archived prices, newest first
        threshold_percent: Change (in %) beyond which the trend is up or down

    Returns:
        PriceTrend; stable with no change percent when history is empty
        or the previous price is zero
    """
    if not history:
        return PriceTrend(
            crop_type=crop_type,
            current_price=current_price,
            trend_direction=TrendDirection.STABLE,
        )

    previous_price = history[0].price
    change_percent = _change_percent(current_price, previous_price)

    if change_percent is None:
        direction = TrendDirection.STABLE
    elif change_percent > threshold_percent:
        direction = TrendDirection.UP
    elif change_percent < -threshold_percent:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.STABLE

    return PriceTrend(
        crop_type=crop_type,
        current_price=current_price,
        trend_direction=direction,
        previous_price=previous_price,
        change_percent=change_percent,
        price_history=list(history),
    )


def validate_price_update(
    current_price: float,
    new_price: float,
    min_price: float = 0.01,
    max_price: float = 100.0,
    max_change_percent: float = 50.0,
) -> PriceUpdateValidation:
    """
    Check a proposed price against the allowed bounds and maximum change.

    Returns:
        PriceUpdateValidation with a message explaining any rejection
    """
    if not math.isfinite(new_price) or new_price < min_price or new_price > max_price:
        return PriceUpdateValidation(
            valid=False,
            message=f"Price must be between {min_price} and {max_price}",
        )

    change_percent = _change_percent(new_price, current_price)
    if change_percent is not None and abs(change_percent) > max_change_percent:
        return PriceUpdateValidation(
            valid=False,
            message=f"Price change too large ({abs(change_percent):.1f}%). Please verify the price.",
        )

    return PriceUpdateValidation(valid=True)


class PriceOracleService:
    """
    Price oracle service for reading and updating crop reference prices.

    Prices are entered manually by administrators; automated oracle feeds
    are not connected yet.
    """

    def __init__(self, repo: PriceRepository):
        """
        Initialize the price oracle service.

        Args:
            repo: Repository holding active prices and history
        """
        self.repo = repo

    def get_current_prices(self) -> List[CropPrice]:
        """Get active prices for all crop types, most recently updated first."""
        return self.repo.list_active()

    def get_current_price(self, crop_type: CropType) -> Optional[CropPrice]:
        """Get the active price for a crop, or None."""
        return self.repo.get_active(crop_type)

    def get_price_history(
        self, crop_type: CropType, limit: Optional[int] = None
    ) -> List[PriceHistoryEntry]:
        """Get archived prices for a crop, newest first."""
        if limit is None:
            limit = settings.PRICE_HISTORY_LIMIT
        return self.repo.get_history(crop_type, limit=limit)

    def update_price(
        self,
        crop_type: CropType,
        new_price: float,
        updated_by: str,
        source_reference: Optional[str] = None,
    ) -> CropPrice:
        """
        Manually update the price of a crop.

        Args:
            crop_type: Crop to update
            new_price: New price per kg
            updated_by: User making the change
            source_reference: Optional reference (market report, etc.)

        Returns:
            The new active price

        Raises:
            ValueError: If the crop has no active price or the update is rejected
        """
        current = self.repo.get_active(crop_type)
        if current is None:
            raise ValueError(f"Current price not found for {crop_type.value}")

        validation = validate_price_update(
            current.price,
            new_price,
            min_price=settings.MIN_CROP_PRICE,
            max_price=settings.MAX_CROP_PRICE,
            max_change_percent=settings.MAX_PRICE_CHANGE_PERCENT,
        )
        if not validation.valid:
            logger.warning(
                f"Rejected price update for {crop_type.value} by {updated_by}: {validation.message}"
            )
            raise ValueError(validation.message)

        updated = self.repo.replace_active(
            crop_type,
            new_price,
            updated_by=updated_by,
            source=PriceFeedSource.MANUAL,
            source_reference=source_reference,
        )

        change_percent = _change_percent(new_price, current.price)
        change = f" ({change_percent:+.2f}%)" if change_percent is not None else ""
        logger.info(
            f"Price of {crop_type.value} updated from {current.price} to {new_price} "
            f"{updated.currency}{change} by {updated_by}"
        )
        return updated

    def get_price_trend(self, crop_type: CropType) -> PriceTrend:
        """
        Get the latest price movement for a crop.

        Raises:
            ValueError: If the crop has no active price
        """
        current = self.repo.get_active(crop_type)
        if current is None:
            raise ValueError(f"Current price not found for {crop_type.value}")

        history = self.repo.get_history(crop_type, limit=10)
        return compute_price_trend(
            crop_type,
            current.price,
            history,
            threshold_percent=settings.PRICE_TREND_THRESHOLD_PERCENT,
        )

    def get_all_price_trends(self) -> List[PriceTrend]:
        """Get trends for every crop type, skipping crops without a price."""
        trends = []
        for crop_type in CropType:
            try:
                trends.append(self.get_price_trend(crop_type))
            except ValueError as e:
                logger.error(f"Error getting trend for {crop_type.value}: {e}")
        return trends

    def get_price_reference(self, crop_type: CropType) -> CropPriceReference:
        """
        Get the reference price used to value a crop evaluation.

        Falls back to the configured default price when no price is stored.
        """
        current = self.repo.get_active(crop_type)
        if current is None:
            logger.warning(
                f"No active price for {crop_type.value}, using default price"
            )
            return CropPriceReference(
                crop_type=crop_type,
                current_price=settings.default_prices[crop_type.value],
                last_updated=None,
                source=PriceReferenceSource.DEFAULT,
            )

        source = (
            PriceReferenceSource.MANUAL
            if current.source == PriceFeedSource.MANUAL
            else PriceReferenceSource.ORACLE
        )
        return CropPriceReference(
            crop_type=crop_type,
            current_price=current.price,
            last_updated=current.updated_at,
            source=source,
        )

    @staticmethod
    def chainlink_integration_status() -> dict:
        """Report whether an automated Chainlink price feed is available."""
        return {
            "supported": False,
            "message": "Chainlink integration is not available yet. Prices are updated manually.",
        }
