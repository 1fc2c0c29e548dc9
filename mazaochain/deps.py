"""Dependency injection for FastAPI endpoints."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from mazaochain.config import settings
from mazaochain.core.enums import CropType
from mazaochain.repositories.price_repository import PriceRepository
from mazaochain.services.price_oracle import PriceOracleService
from mazaochain.services.rule_engine import RuleEngine
from mazaochain.services.valuation import ValuationEngine
from mazaochain.services.wallet_sdk import WalletSdkProvider, get_wallet_sdk_provider

__all__ = [
    "get_price_repository",
    "get_price_oracle",
    "get_valuation_engine",
    "get_rule_engine",
    "get_wallet_sdk",
]


@lru_cache
def get_price_repository() -> PriceRepository:
    """
    Get the process-wide price repository.

    The repository is seeded with the configured default prices on first use.
    """
    repo = PriceRepository()
    repo.seed(
        {crop_type: settings.default_prices[crop_type.value] for crop_type in CropType},
        currency=settings.CURRENCY,
    )
    return repo


def get_price_oracle(
    repo: Annotated[PriceRepository, Depends(get_price_repository)],
) -> PriceOracleService:
    """Get price oracle service dependency."""
    return PriceOracleService(repo)


def get_valuation_engine(
    oracle: Annotated[PriceOracleService, Depends(get_price_oracle)],
) -> ValuationEngine:
    """Get valuation engine dependency, backed by the price oracle."""
    return ValuationEngine(price_lookup=oracle.get_price_reference)


def get_rule_engine() -> RuleEngine:
    """Get loan eligibility rule engine dependency."""
    return RuleEngine()


@lru_cache
def get_wallet_sdk() -> WalletSdkProvider:
    """Get the process-wide wallet SDK provider."""
    return get_wallet_sdk_provider()
