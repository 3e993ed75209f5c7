"""Logger factory for creating configured loggers."""
import logging
import logging.handlers
import sys
from typing import List, Optional, Union

from config_cascade.utils.logging.formatters import StructuredJSONFormatter
from config_cascade.utils.logging.handlers import NullHandler

_logger = logging.getLogger(__name__)


def configure_logging(
    service_name: str,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    enable_console: bool = True,
) -> None:
    """Configure global logging settings.

    Args:
        service_name: Service name for all logs
        level: Global log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to a rotating log file (optional)
        enable_console: Enable console output (stderr)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = StructuredJSONFormatter(service_name=service_name)

    handlers: List[logging.Handler] = []

    # stderr keeps stdout free for command output
    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        handlers.append(NullHandler())

    for handler in handlers:
        root_logger.addHandler(handler)

    _logger.debug(
        "Logging configured",
        extra={
            "service_name": service_name,
            "level": logging.getLevelName(level),
            "log_file": log_file,
            "handlers_count": len(handlers),
        },
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Example:
        logger = get_logger(__name__)
        logger.info("This will be structured JSON")
    """
    return logging.getLogger(name)


def disable_logging() -> None:
    """Disable all logging (use NullHandler).

    Useful for tests.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(NullHandler())
