"""Crop evaluation domain models."""

from dataclasses import asdict, dataclass

from mazaochain.core.enums import CropType


@dataclass(frozen=True)
class CropEvaluationInput:
    """
    A farmer's crop evaluation as submitted.

    Attributes:
        crop_type: Crop being pledged
        area_hectares: Cultivated surface in hectares
        historical_yield: Historical yield in kg per hectare
        reference_price: Reference price per kg
    """

    crop_type: CropType
    area_hectares: float
    historical_yield: float
    reference_price: float


@dataclass(frozen=True)
class CropEvaluationResult:
    """Crop evaluation input with its estimated harvest value."""

    crop_type: CropType
    area_hectares: float
    historical_yield: float
    reference_price: float
    estimated_value: float

    @classmethod
    def from_input(
        cls, evaluation: CropEvaluationInput, estimated_value: float
    ) -> "CropEvaluationResult":
        return cls(**asdict(evaluation), estimated_value=estimated_value)
