"""Unit tests for the exception hierarchy."""
from config_cascade.exceptions import (
    ConfigCascadeError,
    ConfigDirectoryError,
    ConfigError,
    ConfigParseError,
    DatabaseUrlError,
)


def test_config_errors_share_base():
    """Should let callers catch every failure through one base class."""
    for error in (
        ConfigDirectoryError("/missing"),
        ConfigParseError("bad file", config_file="/etc/app/index.py"),
        DatabaseUrlError("DATABASE_URL", "nope"),
    ):
        assert isinstance(error, ConfigError)
        assert isinstance(error, ConfigCascadeError)


def test_directory_error_names_directory_once():
    """Should mention the directory a single time in the message."""
    error = ConfigDirectoryError("/srv/app/config")

    assert str(error) == "[CONFIG_DIRECTORY_INVALID] /srv/app/config is not a valid directory"
    assert error.config_file is None
    assert error.details == {"directory": "/srv/app/config"}


def test_parse_error_message_and_details():
    """Should carry the file, position and original error."""
    original = SyntaxError("invalid syntax")
    error = ConfigParseError(
        "Failed to load config file",
        config_file="/etc/app/index.py",
        line_number=3,
        column_number=7,
        original_error=original,
    )

    assert error.error_code == "CONFIG_PARSE_FAILED"
    assert error.details == {"line": 3, "column": 7}
    assert error.original_error is original
    assert "Config: /etc/app/index.py" in str(error)
    assert "caused by: SyntaxError" in str(error)


def test_database_url_error_names_variable_and_value():
    """Should identify the offending variable and value."""
    error = DatabaseUrlError("SPECIAL_URL", "something-else")

    assert "SPECIAL_URL" in str(error)
    assert "something-else" in str(error)
    assert error.to_dict() == {
        "error_code": "DATABASE_URL_INVALID",
        "message": "Invalid database environment variable, SPECIAL_URL: something-else",
        "details": {"var_name": "SPECIAL_URL"},
        "exception_type": "DatabaseUrlError",
    }
