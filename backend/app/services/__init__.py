"""Business services."""

from app.services.screener import Screener, StockFilter, apply_filter

__all__ = [
    "Screener",
    "StockFilter",
    "apply_filter",
]
