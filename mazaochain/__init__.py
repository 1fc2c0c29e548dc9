"""MazaoChain crop valuation and collateral service."""

__version__ = "1.0.0"
