"""Data layer utilities for loading the market configuration."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import CONFIG_FILENAME, get_config_path, get_repo_root

__all__ = [
    "CONFIG_FILENAME",
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "get_config_path",
    "get_repo_root",
]
