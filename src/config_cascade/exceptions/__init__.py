"""Custom exceptions for the configuration cascade."""

from config_cascade.exceptions.base import ConfigCascadeError

from config_cascade.exceptions.config import (
    ConfigError,
    ConfigDirectoryError,
    ConfigParseError,
    ConfigMergeError,
    DatabaseUrlError,
)

__all__ = [
    # Base exceptions
    "ConfigCascadeError",
    # Configuration exceptions
    "ConfigError",
    "ConfigDirectoryError",
    "ConfigParseError",
    "ConfigMergeError",
    "DatabaseUrlError",
]
