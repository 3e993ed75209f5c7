"""Configuration-related exceptions."""
from typing import Any, Optional

from config_cascade.exceptions.base import ConfigCascadeError


class ConfigError(ConfigCascadeError):
    """Base exception for configuration errors.

    Args:
        message: Human-readable error message
        config_file: Path to the offending config file or directory
        error_code: Machine-readable error code
        details: Additional error context
        original: Wrapped exception, if any
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
        original: Optional[Exception] = None,
    ):
        self.config_file = config_file
        super().__init__(
            message,
            error_code=error_code or "CONFIG_ERROR",
            details=details,
            original=original,
        )

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.config_file:
            parts.append(f"Config: {self.config_file}")
        return " | ".join(parts)


class ConfigDirectoryError(ConfigError):
    """Base config directory is missing or not a directory."""

    def __init__(self, directory: Any):
        # The message already names the directory, so config_file stays unset
        super().__init__(
            f"{directory} is not a valid directory",
            error_code="CONFIG_DIRECTORY_INVALID",
            details={"directory": str(directory)},
        )


class ConfigParseError(ConfigError):
    """Failed to load or evaluate a configuration source file."""

    def __init__(
        self,
        message: str = "Failed to parse config file",
        config_file: Optional[str] = None,
        line_number: Optional[int] = None,
        column_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if line_number is not None:
            details["line"] = line_number
        if column_number is not None:
            details["column"] = column_number
        super().__init__(
            message,
            config_file=config_file,
            error_code="CONFIG_PARSE_FAILED",
            details=details,
            original=original_error,
        )
        self.original_error = original_error


class ConfigMergeError(ConfigError):
    """Failed to merge configuration mappings."""

    def __init__(
        self,
        message: str = "Failed to merge configurations",
        config_file: Optional[str] = None,
        conflict_path: Optional[str] = None,
    ):
        details = {}
        if conflict_path is not None:
            details["conflict_path"] = conflict_path
        super().__init__(
            message,
            config_file=config_file,
            error_code="CONFIG_MERGE_FAILED",
            details=details,
        )


class DatabaseUrlError(ConfigError):
    """Connection-string environment variable is set but malformed."""

    def __init__(self, var_name: str, value: str):
        super().__init__(
            f"Invalid database environment variable, {var_name}: {value}",
            error_code="DATABASE_URL_INVALID",
            details={"var_name": var_name},
        )
        self.var_name = var_name
        self.value = value
