"""Base repository implementation for TOML config data."""
from __future__ import annotations

from pathlib import Path
from typing import Generic, TypeVar

from herbmarket.data.errors import DataValidationError
from herbmarket.data.toml_loader import load_toml
from herbmarket.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else None
        self._definition: T | None = None

    def _get_file_path(self) -> Path:
        return paths.get_config_path(self._base_path)

    def _load_raw(self) -> dict[str, object]:
        return load_toml(self._get_file_path())

    def _build(self, raw: dict[str, object]) -> T:
        """Convert a raw dict into a typed definition."""
        raise NotImplementedError

    def load(self) -> T:
        """Return the definition, reading the file on first use."""
        if self._definition is None:
            raw = self._load_raw()
            self._definition = self._build(raw)
        return self._definition

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be a table.")
        return value

    @staticmethod
    def _require_list(value: object, context: str) -> list[object]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be an array.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return float(value)

    @staticmethod
    def _assert_exact_fields(payload: dict[str, object], expected_keys: set[str], context: str) -> None:
        actual_keys = set(payload.keys())
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            unknown = actual_keys - expected_keys
            pieces = []
            if missing:
                pieces.append(f"missing fields: {sorted(missing)}")
            if unknown:
                pieces.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has {'; '.join(pieces)}.")
