"""Service layer for business logic."""

from mazaochain.services.collateral import assess_collateral
from mazaochain.services.price_oracle import PriceOracleService
from mazaochain.services.rule_engine import RuleEngine
from mazaochain.services.valuation import ValuationEngine, estimate_crop_value

__all__ = [
    "assess_collateral",
    "estimate_crop_value",
    "PriceOracleService",
    "RuleEngine",
    "ValuationEngine",
]
