"""Crop valuation: harvest value estimated from area, yield and price."""

import logging
from typing import Optional

from mazaochain.core.enums import CropType
from mazaochain.models.domain.pricing import CropPriceReference
from mazaochain.models.domain.valuation import CropEvaluationInput, CropEvaluationResult

logger = logging.getLogger(__name__)


def estimate_crop_value(
    area_hectares: float,
    historical_yield: float,
    reference_price: float,
) -> float:
    """
    Estimate the monetary value of a harvest.

    value = area (ha) * historical yield (kg/ha) * reference price (per kg)

    Inputs are not validated and the result is not rounded; NaN and
    infinities propagate to the caller.
    """
    return area_hectares * historical_yield * reference_price


class ValuationEngine:
    """
    Turns crop evaluation submissions into valued evaluation results.

    When a submission carries no reference price, the engine asks the
    injected price lookup for the current reference price of the crop.
    """

    def __init__(self, price_lookup=None):
        """
        Initialize the valuation engine.

        Args:
            price_lookup: Callable taking a CropType and returning a
                CropPriceReference, used when no reference price is given
        """
        self._price_lookup = price_lookup

    def evaluate(self, evaluation: CropEvaluationInput) -> CropEvaluationResult:
        """Value a complete crop evaluation."""
        estimated_value = estimate_crop_value(
            evaluation.area_hectares,
            evaluation.historical_yield,
            evaluation.reference_price,
        )
        return CropEvaluationResult.from_input(evaluation, estimated_value)

    def resolve_reference_price(
        self,
        crop_type: CropType,
        submitted_price: Optional[float] = None,
    ) -> float:
        """
        Pick the reference price for a submission.

        A submitted non-zero price wins. Otherwise the price lookup supplies
        the current reference price.

        Raises:
            ValueError: If no price was submitted and no lookup is configured
        """
        if submitted_price:
            return submitted_price

        if self._price_lookup is None:
            raise ValueError(
                f"No reference price submitted for {crop_type.value} and no price source configured"
            )

        reference: CropPriceReference = self._price_lookup(crop_type)
        logger.info(
            f"Using {reference.source.value} reference price {reference.current_price} for {crop_type.value}"
        )
        return reference.current_price

    def evaluate_submission(
        self,
        crop_type: CropType,
        area_hectares: float,
        historical_yield: float,
        reference_price: Optional[float] = None,
    ) -> CropEvaluationResult:
        """Resolve the reference price of a form submission, then value it."""
        evaluation = CropEvaluationInput(
            crop_type=crop_type,
            area_hectares=area_hectares,
            historical_yield=historical_yield,
            reference_price=self.resolve_reference_price(crop_type, reference_price),
        )
        return self.evaluate(evaluation)
