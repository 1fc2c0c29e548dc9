"""Pydantic schemas for API validation and serialization."""

from mazaochain.models.schemas.collateral import (
    CollateralAssessmentRequest,
    CollateralAssessmentResponse,
    LoanEligibilityRequest,
    LoanEligibilityResponse,
)
from mazaochain.models.schemas.loan import (
    InterestCalculationRequest,
    InterestCalculationResponse,
    RepaymentInstallmentResponse,
    RepaymentScheduleRequest,
)
from mazaochain.models.schemas.pricing import (
    CropPriceReferenceResponse,
    CropPriceResponse,
    PriceHistoryResponse,
    PriceTrendResponse,
    PriceUpdateRequest,
)
from mazaochain.models.schemas.valuation import (
    CropEvaluationCreate,
    CropEvaluationResponse,
)

__all__ = [
    # Valuation schemas
    "CropEvaluationCreate",
    "CropEvaluationResponse",
    # Collateral schemas
    "CollateralAssessmentRequest",
    "CollateralAssessmentResponse",
    "LoanEligibilityRequest",
    "LoanEligibilityResponse",
    # Price schemas
    "CropPriceResponse",
    "PriceHistoryResponse",
    "PriceTrendResponse",
    "CropPriceReferenceResponse",
    "PriceUpdateRequest",
    # Loan schemas
    "InterestCalculationRequest",
    "InterestCalculationResponse",
    "RepaymentScheduleRequest",
    "RepaymentInstallmentResponse",
]
