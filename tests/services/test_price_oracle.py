"""
Unit tests for the price oracle.

Coverage:
- compute_price_trend(): direction thresholds
- validate_price_update(): bounds and maximum change
- PriceOracleService: updates, history, trends, reference prices
"""

import math
from datetime import datetime, timezone

import pytest

from mazaochain.core.enums import (
    CropType,
    PriceFeedSource,
    PriceReferenceSource,
    TrendDirection,
)
from mazaochain.models.domain.pricing import PriceHistoryEntry
from mazaochain.repositories.price_repository import PriceRepository
from mazaochain.services.price_oracle import (
    PriceOracleService,
    compute_price_trend,
    validate_price_update,
)


def _history(*prices):
    return [
        PriceHistoryEntry(
            crop_type=CropType.MANIOC,
            price=price,
            currency="USDC",
            source=PriceFeedSource.MANUAL,
            recorded_at=datetime.now(timezone.utc),
        )
        for price in prices
    ]


class TestComputePriceTrend:
    """Tests for price trend computation."""

    def test_no_history_is_stable(self):
        trend = compute_price_trend(CropType.MANIOC, 0.5, [])

        assert trend.trend_direction == TrendDirection.STABLE
        assert trend.previous_price is None
        assert trend.change_percent is None

    @pytest.mark.parametrize(
        "current, direction",
        [
            (0.55, TrendDirection.UP),
            (0.45, TrendDirection.DOWN),
            (0.504, TrendDirection.STABLE),
            (0.496, TrendDirection.STABLE),
        ],
    )
    def test_direction(self, current, direction):
        """Should only move up or down beyond 1%."""
        trend = compute_price_trend(CropType.MANIOC, current, _history(0.5, 0.4))

        assert trend.trend_direction == direction
        assert trend.previous_price == 0.5

    def test_change_percent_uses_newest_history_entry(self):
        trend = compute_price_trend(CropType.MANIOC, 0.6, _history(0.5, 0.1))

        assert trend.change_percent == pytest.approx(20.0)
        assert len(trend.price_history) == 2

    def test_zero_previous_price_is_stable(self):
        trend = compute_price_trend(CropType.MANIOC, 0.5, _history(0.0))

        assert trend.trend_direction == TrendDirection.STABLE
        assert trend.previous_price == 0.0
        assert trend.change_percent is None


class TestValidatePriceUpdate:
    """Tests for price update validation."""

    def test_reasonable_update_is_valid(self):
        result = validate_price_update(0.5, 0.6)

        assert result.valid is True
        assert result.message is None

    @pytest.mark.parametrize("new_price", [0.005, 100.5])
    def test_out_of_bounds(self, new_price):
        result = validate_price_update(50.0, new_price)

        assert result.valid is False
        assert "between 0.01 and 100.0" in result.message

    def test_change_over_50_percent(self):
        result = validate_price_update(0.5, 0.8)

        assert result.valid is False
        assert "60.0%" in result.message

    def test_change_of_exactly_50_percent_is_allowed(self):
        assert validate_price_update(2.0, 3.0).valid is True

    @pytest.mark.parametrize("new_price", [math.nan, math.inf, -math.inf])
    def test_non_finite_price_is_invalid(self, new_price):
        result = validate_price_update(0.5, new_price)

        assert result.valid is False
        assert "between 0.01 and 100.0" in result.message

    def test_zero_current_price_skips_change_check(self):
        assert validate_price_update(0.0, 0.5).valid is True


class TestPriceOracleService:
    """Tests for the price oracle service."""

    def test_current_prices_are_seeded(self, price_oracle):
        prices = {price.crop_type: price.price for price in price_oracle.get_current_prices()}

        assert prices == {CropType.MANIOC: 0.5, CropType.CAFE: 2.0}

    def test_update_archives_previous_price(self, price_oracle):
        updated = price_oracle.update_price(
            CropType.CAFE, 2.4, updated_by="admin-1", source_reference="market report"
        )

        assert updated.price == 2.4
        assert updated.updated_by == "admin-1"
        assert updated.source_reference == "market report"
        history = price_oracle.get_price_history(CropType.CAFE)
        assert [entry.price for entry in history] == [2.0]

    def test_history_is_newest_first(self, price_oracle):
        price_oracle.update_price(CropType.MANIOC, 0.6, updated_by="admin-1")
        price_oracle.update_price(CropType.MANIOC, 0.7, updated_by="admin-1")

        history = price_oracle.get_price_history(CropType.MANIOC)

        assert [entry.price for entry in history] == [0.6, 0.5]
        assert len(price_oracle.get_price_history(CropType.MANIOC, limit=1)) == 1

    def test_rejected_update_keeps_price(self, price_oracle):
        with pytest.raises(ValueError, match="Price change too large"):
            price_oracle.update_price(CropType.MANIOC, 5.0, updated_by="admin-1")

        assert price_oracle.get_current_price(CropType.MANIOC).price == 0.5
        assert price_oracle.get_price_history(CropType.MANIOC) == []

    @pytest.mark.parametrize("new_price", [math.nan, math.inf])
    def test_non_finite_update_is_rejected(self, price_oracle, new_price):
        with pytest.raises(ValueError, match="Price must be between"):
            price_oracle.update_price(CropType.MANIOC, new_price, updated_by="admin")

        assert price_oracle.get_current_price(CropType.MANIOC).price == 0.5
        assert price_oracle.get_price_history(CropType.MANIOC) == []

    def test_update_from_zero_price(self):
        repo = PriceRepository()
        repo.seed({CropType.MANIOC: 0.0}, currency="USDC")
        oracle = PriceOracleService(repo)

        updated = oracle.update_price(CropType.MANIOC, 0.5, updated_by="admin-1")

        assert updated.price == 0.5
        assert oracle.get_price_trend(CropType.MANIOC).change_percent is None

    def test_update_without_current_price_raises(self):
        oracle = PriceOracleService(PriceRepository())

        with pytest.raises(ValueError, match="Current price not found"):
            oracle.update_price(CropType.MANIOC, 0.5, updated_by="admin-1")

    def test_trend_after_update(self, price_oracle):
        price_oracle.update_price(CropType.CAFE, 2.5, updated_by="admin-1")

        trend = price_oracle.get_price_trend(CropType.CAFE)

        assert trend.trend_direction == TrendDirection.UP
        assert trend.previous_price == 2.0
        assert trend.change_percent == pytest.approx(25.0)

    def test_all_trends_skip_crops_without_price(self):
        repo = PriceRepository()
        repo.seed({CropType.CAFE: 2.0}, currency="USDC")

        trends = PriceOracleService(repo).get_all_price_trends()

        assert [trend.crop_type for trend in trends] == [CropType.CAFE]

    def test_reference_from_manual_price(self, price_oracle):
        reference = price_oracle.get_price_reference(CropType.MANIOC)

        assert reference.current_price == 0.5
        assert reference.source == PriceReferenceSource.MANUAL
        assert reference.last_updated is not None

    def test_reference_from_oracle_feed(self, price_repo, price_oracle):
        price_repo.replace_active(CropType.CAFE, 2.1, source=PriceFeedSource.CHAINLINK)

        reference = price_oracle.get_price_reference(CropType.CAFE)

        assert reference.source == PriceReferenceSource.ORACLE
        assert reference.current_price == 2.1

    def test_reference_falls_back_to_default(self):
        reference = PriceOracleService(PriceRepository()).get_price_reference(CropType.CAFE)

        assert reference.source == PriceReferenceSource.DEFAULT
        assert reference.current_price == 2.0
        assert reference.last_updated is None

    def test_chainlink_not_supported(self):
        assert PriceOracleService.chainlink_integration_status()["supported"] is False
