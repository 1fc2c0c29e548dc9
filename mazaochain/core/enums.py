"""Core enums for type safety across the application."""

from enum import Enum


class CropType(str, Enum):
    """Crops accepted as loan collateral."""

    MANIOC = "manioc"
    CAFE = "cafe"


class PriceReferenceSource(str, Enum):
    """Where a reference price handed to valuation came from."""

    MANUAL = "manual"
    ORACLE = "oracle"
    DEFAULT = "default"


class PriceFeedSource(str, Enum):
    """Origin of a stored crop price record."""

    MANUAL = "manual"
    CHAINLINK = "chainlink"
    EXTERNAL_API = "external_api"


class TrendDirection(str, Enum):
    """Direction of the latest price movement."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class LoanStatus(str, Enum):
    """Loan lifecycle states."""

    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    REPAID = "repaid"
    DEFAULTED = "defaulted"
    REJECTED = "rejected"


class InstallmentStatus(str, Enum):
    """Repayment installment states."""

    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class LoanRuleType(str, Enum):
    """Rule types checked before a loan request is accepted."""

    # Collateral rules
    COLLATERAL_RATIO = "collateral_ratio"
    COLLATERAL_TOKENS = "collateral_tokens"

    # Borrower rules
    NO_ACTIVE_LOAN = "no_active_loan"

    # Loan rules
    REPAYMENT_TERM = "repayment_term"
