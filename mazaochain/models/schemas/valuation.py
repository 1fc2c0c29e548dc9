"""Pydantic schemas for crop evaluation requests and results."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mazaochain.core.enums import CropType


class CropEvaluationCreate(BaseModel):
    """Schema for a crop evaluation submitted by a farmer."""

    crop_type: CropType
    area_hectares: float = Field(..., gt=0, description="Cultivated area in hectares")
    historical_yield: float = Field(..., gt=0, description="Historical yield in kg per hectare")
    reference_price: Optional[float] = Field(
        None,
        gt=0,
        description="Price per kg; the current oracle price is used when omitted",
    )


class CropEvaluationResponse(BaseModel):
    """Schema for a valued crop evaluation."""

    crop_type: CropType
    area_hectares: float
    historical_yield: float
    reference_price: float
    estimated_value: float

    model_config = ConfigDict(from_attributes=True)
