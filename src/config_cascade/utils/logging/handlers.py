"""Log handlers for structured logging."""
import logging


class NullHandler(logging.Handler):
    """Handler that drops all log messages.

    Useful for testing or disabling logging for specific modules.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Drop all log records."""
        pass

    def flush(self) -> None:
        """No-op flush."""
        pass
