"""Cascading configuration loader.

Builds one configuration dict from a base mapping, a config directory, its
environment and local subdirectories, and a database connection string.

Example:
    from config_cascade import load_config

    config = load_config("config", {"name": "app"})
"""

from config_cascade.config import (  # noqa: F401
    AGGREGATE_STEM,
    DEFAULT_DATABASE_KEY,
    DEFAULT_DATABASE_URL_ENV_KEY,
    DEFAULT_ENVIRONMENT,
    DEFAULT_ENVIRONMENT_ENV_KEY,
    LOCAL_DIRECTORY,
    ConfigLoader,
    ConfigMerger,
    PythonFragmentResolver,
    ResolutionOptions,
    YAMLFragmentResolver,
    deep_merge,
    load_config,
    parse_database_url,
    resolve,
)
from config_cascade.exceptions import (  # noqa: F401
    ConfigCascadeError,
    ConfigDirectoryError,
    ConfigError,
    ConfigMergeError,
    ConfigParseError,
    DatabaseUrlError,
)

__version__ = "0.1.0"

__all__ = [
    "AGGREGATE_STEM",
    "DEFAULT_DATABASE_KEY",
    "DEFAULT_DATABASE_URL_ENV_KEY",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_ENVIRONMENT_ENV_KEY",
    "LOCAL_DIRECTORY",
    "ConfigLoader",
    "ConfigMerger",
    "PythonFragmentResolver",
    "ResolutionOptions",
    "YAMLFragmentResolver",
    "deep_merge",
    "load_config",
    "parse_database_url",
    "resolve",
    "ConfigCascadeError",
    "ConfigDirectoryError",
    "ConfigError",
    "ConfigMergeError",
    "ConfigParseError",
    "DatabaseUrlError",
]
