"""Helpers for resolving the config file location."""
from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME = "herb-market.config.toml"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_config_path(base_path: Path | str | None = None) -> Path:
    """Return the path of the market config file.

    The file is looked up in the working directory unless a directory is given.
    """
    directory = Path(base_path) if base_path is not None else Path.cwd()
    return directory / CONFIG_FILENAME
