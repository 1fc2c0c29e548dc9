"""In-memory price repository for active crop prices and their history."""

import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from mazaochain.core.enums import CropType, PriceFeedSource
from mazaochain.models.domain.pricing import CropPrice, PriceHistoryEntry


class PriceRepository:
    """
    Repository holding one active price per crop plus an append-only history.

    Replacing an active price archives the previous one into the history.
    All operations are guarded by a lock so a single instance can be shared
    across request handlers.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._active: Dict[CropType, CropPrice] = {}
        self._history: Dict[CropType, List[PriceHistoryEntry]] = {
            crop_type: [] for crop_type in CropType
        }

    def seed(self, prices: Dict[CropType, float], currency: str) -> None:
        """
        Store initial prices for crops that have no active price yet.

        Args:
            prices: Price per crop type
            currency: Currency the prices are quoted in
        """
        now = datetime.now(timezone.utc)
        with self._lock:
            for crop_type, price in prices.items():
                self._active.setdefault(
                    crop_type,
                    CropPrice(
                        crop_type=crop_type,
                        price=price,
                        currency=currency,
                        source=PriceFeedSource.MANUAL,
                        updated_at=now,
                    ),
                )

    def get_active(self, crop_type: CropType) -> Optional[CropPrice]:
        """
        Retrieve the active price for a crop.

        Returns:
            The active price if one is stored, None otherwise
        """
        with self._lock:
            return self._active.get(crop_type)

    def list_active(self) -> List[CropPrice]:
        """Retrieve all active prices, most recently updated first."""
        with self._lock:
            prices = list(self._active.values())
        return sorted(prices, key=lambda price: price.updated_at, reverse=True)

    def replace_active(
        self,
        crop_type: CropType,
        price: float,
        updated_by: Optional[str] = None,
        source: PriceFeedSource = PriceFeedSource.MANUAL,
        source_reference: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> CropPrice:
        """
        Replace the active price of a crop, archiving the previous one.

        Args:
            crop_type: Crop to update
            price: New price
            updated_by: User making the change
            source: Feed that produced the price
            source_reference: Optional reference for the new price
            currency: Currency for a crop with no previous price

        Returns:
            The new active price

        Raises:
            ValueError: If the crop has no active price and no currency is given
        """
        now = datetime.now(timezone.utc)
        with self._lock:
            previous = self._active.get(crop_type)
            if previous is None:
                if currency is None:
                    raise ValueError(f"No active price for {crop_type.value} and no currency given")
                updated = CropPrice(
                    crop_type=crop_type,
                    price=price,
                    currency=currency,
                    source=source,
                    updated_at=now,
                    source_reference=source_reference,
                    updated_by=updated_by,
                )
            else:
                self._history[crop_type].append(
                    PriceHistoryEntry(
                        crop_type=crop_type,
                        price=previous.price,
                        currency=previous.currency,
                        source=previous.source,
                        recorded_at=now,
                        source_reference=previous.source_reference,
                    )
                )
                updated = replace(
                    previous,
                    price=price,
                    source=source,
                    updated_at=now,
                    source_reference=source_reference,
                    updated_by=updated_by,
                )
            self._active[crop_type] = updated
            return updated

    def get_history(self, crop_type: CropType, limit: int = 30) -> List[PriceHistoryEntry]:
        """
        Retrieve archived prices for a crop, newest first.

        Args:
            crop_type: Crop to look up
            limit: Maximum number of entries to return
        """
        with self._lock:
            history = list(self._history[crop_type])
        return list(reversed(history))[:limit]
