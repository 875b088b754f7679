"""Service layer exports."""

from .stock_service import StockRowView, StockService, StockView

__all__ = [
    "StockRowView",
    "StockService",
    "StockView",
]
