"""Structured JSON log formatters."""
import json
import logging
import traceback
from datetime import datetime
from typing import Any, Dict


# Attributes every LogRecord carries; anything else arrived through extra={...}
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}

# Sensitive data patterns to redact
_SENSITIVE_PATTERNS = (
    "api_key",
    "password",
    "passwd",
    "token",
    "secret",
    "authorization",
    "bearer",
    "database_url",
)


def _serialize_value(value: Any) -> Any:
    """Safely serialize value to JSON-compatible type."""
    if value is None:
        return None
    elif isinstance(value, (str, int, float, bool)):
        return value
    elif isinstance(value, (list, dict)):
        return value
    elif hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _redact_sensitive(data: Any) -> Any:
    """Redact sensitive values from data.

    Args:
        data: Data to redact (can be dict, list, or primitive)

    Returns:
        Redacted data with sensitive values replaced with [REDACTED]
    """
    if isinstance(data, dict):
        redacted = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(pattern in key_lower for pattern in _SENSITIVE_PATTERNS):
                redacted[key] = "[REDACTED]"
            elif isinstance(value, (dict, list)):
                redacted[key] = _redact_sensitive(value)
            else:
                redacted[key] = value
        return redacted
    elif isinstance(data, list):
        return [_redact_sensitive(item) for item in data]
    return data


def extract_extra(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the fields passed to a log call through ``extra``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
    }


class StructuredJSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as JSON with consistent fields:
    - timestamp (ISO 8601)
    - level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - service_name
    - logger_name (module name)
    - message (log message)
    - source_file / source_line / source_function
    - exception and stack_trace (if applicable)
    - every extra field, with sensitive keys redacted
    """

    def __init__(self, service_name: str = "unknown"):
        """Initialize formatter.

        Args:
            service_name: Service name stamped on every entry
        """
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: LogRecord to format

        Returns:
            JSON string
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "service_name": self.service_name,
            "logger_name": record.name,
            "message": record.getMessage(),
            "source_file": record.pathname,
            "source_line": record.lineno,
            "source_function": record.funcName,
        }

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "module": exc_type.__module__ if exc_type else None,
            }
            if exc_tb:
                log_entry["stack_trace"] = traceback.format_exception(exc_type, exc_value, exc_tb)

        log_entry.update(_redact_sensitive(extract_extra(record)))

        log_entry_serializable = {
            key: _serialize_value(value) for key, value in log_entry.items()
        }

        return json.dumps(log_entry_serializable, default=str)
