"""Stock service that turns a market config into a displayable stock list."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from herbmarket.core.rng import RandomSource
from herbmarket.data.repositories import MarketConfigRepository
from herbmarket.domain.stock import generate_stock, sort_stock


@dataclass(slots=True)
class StockRowView:
    name: str
    quantity: int
    price: int


@dataclass(slots=True)
class StockView:
    rows: List[StockRowView] = field(default_factory=list)


class StockService:
    """Rolls stock for the configured market."""

    def __init__(self, *, config_repo: MarketConfigRepository, rng: RandomSource) -> None:
        self._config_repo = config_repo
        self._rng = rng

    def build_stock_view(self) -> StockView:
        config = self._config_repo.load()
        stock = sort_stock(generate_stock(config, self._rng))
        return StockView(
            rows=[
                StockRowView(name=entry.herb.name, quantity=entry.quantity, price=entry.price)
                for entry in stock
            ]
        )
