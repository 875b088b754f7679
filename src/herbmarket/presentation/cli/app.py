"""Console entry point for rolling a market's stock."""
from __future__ import annotations

import os
import secrets
import subprocess
from pathlib import Path

from herbmarket.core.rng import RNG
from herbmarket.data import DataError
from herbmarket.data.repositories import MarketConfigRepository
from herbmarket.presentation.cli.render import render_stock
from herbmarket.services import StockService

_MAX_RANDOM_SEED = 2**31 - 1


def main(base_path: Path | str | None = None) -> None:
    """Roll and print the stock, exiting non-zero if the config is unusable."""
    service = _build_stock_service(base_path)
    try:
        view = service.build_stock_view()
    except DataError as exc:
        raise SystemExit(f"Error: {exc}") from exc
    render_stock(view)
    _pause_if_windows()


def _build_stock_service(base_path: Path | str | None) -> StockService:
    """Construct the StockService with a freshly seeded RNG."""
    config_repo = MarketConfigRepository(base_path)
    rng = RNG(secrets.randbelow(_MAX_RANDOM_SEED))
    return StockService(config_repo=config_repo, rng=rng)


def _pause_if_windows() -> None:
    # Keeps the console window open when launched by double-click.
    if os.name == "nt":
        subprocess.run(["cmd.exe", "/c", "pause"], check=False)
