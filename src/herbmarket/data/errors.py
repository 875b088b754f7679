"""Custom exceptions for configuration loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when the config file is missing, unreadable or not valid TOML."""


class DataValidationError(DataError):
    """Raised when config content fails structural validation."""
