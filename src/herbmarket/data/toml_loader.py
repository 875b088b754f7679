"""Low-level TOML helpers for repositories."""
from __future__ import annotations

import tomllib
from pathlib import Path

from .errors import DataLoadError


def load_toml(path: Path) -> dict[str, object]:
    """Load TOML from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Config file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Unable to read config file: {path}") from exc

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise DataLoadError(f"Invalid TOML in {path}: {exc}") from exc
