"""Domain models for the application."""

from mazaochain.models.domain.collateral import CollateralAssessment, LoanEligibility
from mazaochain.models.domain.loan import InterestCalculation, RepaymentInstallment
from mazaochain.models.domain.pricing import (
    CropPrice,
    CropPriceReference,
    PriceHistoryEntry,
    PriceTrend,
    PriceUpdateValidation,
)
from mazaochain.models.domain.valuation import CropEvaluationInput, CropEvaluationResult

__all__ = [
    "CropEvaluationInput",
    "CropEvaluationResult",
    "CollateralAssessment",
    "LoanEligibility",
    "CropPrice",
    "CropPriceReference",
    "PriceHistoryEntry",
    "PriceTrend",
    "PriceUpdateValidation",
    "InterestCalculation",
    "RepaymentInstallment",
]
