"""Structured JSON logging utility."""

from config_cascade.utils.logging.factory import (  # noqa: F401
    configure_logging,
    disable_logging,
    get_logger,
)
from config_cascade.utils.logging.formatters import StructuredJSONFormatter  # noqa: F401
from config_cascade.utils.logging.handlers import NullHandler  # noqa: F401

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "disable_logging",
    # Formatters
    "StructuredJSONFormatter",
    # Handlers
    "NullHandler",
]
