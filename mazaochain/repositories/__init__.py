from .price_repository import PriceRepository

__all__ = [
    "PriceRepository",
]
