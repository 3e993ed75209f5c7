"""Configuration cascade: discovery, loading and merging."""

from config_cascade.config.locator import (  # noqa: F401
    AGGREGATE_STEM,
    ConfigLocator,
    discover_config_files,
    is_directory,
)
from config_cascade.config.interfaces import (  # noqa: F401
    FragmentResolver,
    Loaded,
    LoadFailure,
    LoadOutcome,
    NotFound,
)
from config_cascade.config.fragments import PythonFragmentResolver, YAMLFragmentResolver  # noqa: F401
from config_cascade.config.merger import ConfigMerger, deep_merge  # noqa: F401
from config_cascade.config.database_url import parse_database_url  # noqa: F401
from config_cascade.config.options import (  # noqa: F401
    DEFAULT_DATABASE_KEY,
    DEFAULT_DATABASE_URL_ENV_KEY,
    DEFAULT_ENVIRONMENT,
    DEFAULT_ENVIRONMENT_ENV_KEY,
    LOCAL_DIRECTORY,
    ResolutionOptions,
)
from config_cascade.config.loader import ConfigLoader, load_config, resolve  # noqa: F401

__all__ = [
    # Directory probing and discovery
    "AGGREGATE_STEM",
    "ConfigLocator",
    "discover_config_files",
    "is_directory",
    # Fragment loading
    "FragmentResolver",
    "Loaded",
    "LoadFailure",
    "LoadOutcome",
    "NotFound",
    "PythonFragmentResolver",
    "YAMLFragmentResolver",
    # Merging
    "ConfigMerger",
    "deep_merge",
    # Connection strings
    "parse_database_url",
    # Options
    "DEFAULT_DATABASE_KEY",
    "DEFAULT_DATABASE_URL_ENV_KEY",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_ENVIRONMENT_ENV_KEY",
    "LOCAL_DIRECTORY",
    "ResolutionOptions",
    # Orchestration
    "ConfigLoader",
    "load_config",
    "resolve",
]
