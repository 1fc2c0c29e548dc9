"""Rule evaluators for the loan eligibility rule types."""

from .borrower_evaluator import BorrowerEvaluator
from .collateral_evaluator import CollateralEvaluator
from .loan_evaluator import LoanEvaluator

__all__ = [
    "BorrowerEvaluator",
    "CollateralEvaluator",
    "LoanEvaluator",
]
