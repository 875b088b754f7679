"""Repository exports."""

from .market_config_repo import MarketConfigRepository

__all__ = [
    "MarketConfigRepository",
]
