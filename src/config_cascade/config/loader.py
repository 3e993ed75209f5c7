"""Config loader orchestrator - cascades directories and the database URL.

Several configuration layers are merged in the following order, with
precedence given to the layers loaded later:

    1. base_config passed by the caller
    2. {config_directory}/*.py (plus index.py when include_root_index is set)
    3. {config_directory}/{environment name}/index.py, then its other files
    4. {config_directory}/local/index.py, then its other files
    5. the connection string in DATABASE_URL, parsed into config["database"]

The environment name is read from NODE_ENV and defaults to "develop".
Recommended names are develop, boom (unstable build), staging and production,
but any directory name works. The local directory is meant to stay out of
version control.
"""
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from config_cascade.config.database_url import parse_database_url
from config_cascade.config.fragments import PythonFragmentResolver
from config_cascade.config.interfaces import FragmentResolver, LoadFailure, NotFound
from config_cascade.config.locator import ConfigLocator, is_directory
from config_cascade.config.merger import ConfigMerger
from config_cascade.config.options import LOCAL_DIRECTORY, ResolutionOptions
from config_cascade.exceptions.config import (
    ConfigDirectoryError,
    ConfigMergeError,
    ConfigParseError,
    DatabaseUrlError,
)


logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], Optional[str]]
OptionsLike = Union[ResolutionOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> ResolutionOptions:
    if options is None:
        return ResolutionOptions()
    if isinstance(options, ResolutionOptions):
        return options
    return ResolutionOptions(**options)


class ConfigLoader:
    """Orchestrates discovery, loading and merging of configuration layers.

    Pipeline:
    1. Validate the base config directory
    2. Merge base directory files into the accumulator
    3. Merge the environment subdirectory
    4. Merge the local subdirectory
    5. Merge the parsed database connection string

    Example:
        loader = ConfigLoader(ResolutionOptions(config_directory="config"))
        config = loader.resolve({"name": "app"})
    """

    def __init__(
        self,
        options: OptionsLike = None,
        resolver: Optional[FragmentResolver] = None,
        env: Optional[EnvLookup] = None,
    ):
        """Initialize config loader.

        Args:
            options: ResolutionOptions or a mapping of its fields
            resolver: Turns source files into fragments (default: Python modules)
            env: Environment lookup (default: os.environ.get)
        """
        self.options = _coerce_options(options)
        self.resolver = resolver if resolver is not None else PythonFragmentResolver()
        self.env = env if env is not None else os.environ.get
        self.locator = ConfigLocator(extensions=self.resolver.extensions)
        self.merger = ConfigMerger()

        logger.debug(
            "ConfigLoader initialized",
            extra={
                "config_directory": str(self.options.config_directory),
                "resolver": type(self.resolver).__name__,
            },
        )

    def environment_name(self) -> str:
        """Return the active environment name."""
        return self.env(self.options.environment_env_key) or self.options.default_environment

    def merge_directory(
        self,
        config: Dict[str, Any],
        directory: Path,
        include_aggregate: bool = True,
    ) -> Dict[str, Any]:
        """Load every source file in directory and merge it into config.

        The index file merges at the top level; any other file merges under
        its stem. A missing directory contributes nothing.

        Raises:
            ConfigParseError: A source file failed to load
        """
        for path in self.locator.discover(directory, include_aggregate=include_aggregate):
            outcome = self.resolver.load(path)

            if isinstance(outcome, NotFound):
                logger.debug(
                    f"Config file vanished before loading: {path}",
                    extra={"path": str(path)},
                )
                continue

            if isinstance(outcome, LoadFailure):
                logger.error(
                    f"Failed to load config file: {path}",
                    extra={"path": str(path), "error": str(outcome.error)},
                )
                raise ConfigParseError(
                    message=f"Failed to load config file {path}: {outcome.error}",
                    config_file=str(path),
                    line_number=outcome.line_number,
                    column_number=outcome.column_number,
                    original_error=outcome.error,
                )

            if self.locator.is_aggregate(path):
                if not isinstance(outcome.fragment, Mapping):
                    raise ConfigParseError(
                        message=(
                            f"Index config must contain a mapping, "
                            f"got {type(outcome.fragment).__name__}"
                        ),
                        config_file=str(path),
                    )
                self.merger.merge(config, outcome.fragment)
            else:
                self.merger.merge_under(config, path.stem, outcome.fragment)

            logger.debug(
                f"Merged config file: {path}",
                extra={"path": str(path), "directory": str(directory)},
            )

        return config

    def merge_database_url(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Parse the connection-string variable and merge it into config.

        Raises:
            DatabaseUrlError: Variable is set but does not match the pattern
        """
        var_name = self.options.database_url_env_key
        database_url = self.env(var_name)
        if not database_url:
            logger.debug(
                f"No database URL in {var_name}",
                extra={"var_name": var_name},
            )
            return config

        descriptor = parse_database_url(database_url)
        if descriptor is None:
            logger.error(
                f"Invalid database URL in {var_name}",
                extra={"var_name": var_name},
            )
            raise DatabaseUrlError(var_name, database_url)

        self.merger.merge_under(config, self.options.database_key, descriptor)

        logger.debug(
            f"Database URL merged from {var_name}",
            extra={"var_name": var_name, "database_key": self.options.database_key},
        )

        return config

    def resolve(self, base_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Resolve the full configuration cascade.

        Args:
            base_config: Common configuration, mutated and returned (default: {})

        Returns:
            The accumulated configuration

        Raises:
            ConfigDirectoryError: config_directory is missing or not a directory
            ConfigParseError: A source file failed to load, or an index file
                does not export a mapping
            ConfigMergeError: base_config is not a dict
            DatabaseUrlError: The connection-string variable is malformed
        """
        config_directory = self.options.config_directory
        if not is_directory(config_directory):
            logger.error(
                f"Config directory not found: {config_directory}",
                extra={"directory": str(config_directory)},
            )
            raise ConfigDirectoryError(config_directory)

        config = base_config if base_config is not None else {}
        if not isinstance(config, dict):
            raise ConfigMergeError(
                f"Base config must be a dict, got {type(config).__name__}"
            )

        self.merge_directory(
            config,
            config_directory,
            include_aggregate=self.options.include_root_index,
        )

        environment = self.environment_name()
        # environment "local" merges the local directory twice
        self.merge_directory(config, config_directory / environment)
        self.merge_directory(config, config_directory / LOCAL_DIRECTORY)

        self.merge_database_url(config)

        logger.info(
            "Config resolved",
            extra={
                "config_directory": str(config_directory),
                "environment": environment,
                "final_keys": len(config),
            },
        )

        return config


def resolve(
    base_config: Optional[Dict[str, Any]] = None,
    options: OptionsLike = None,
    *,
    env: Optional[EnvLookup] = None,
    resolver: Optional[FragmentResolver] = None,
) -> Dict[str, Any]:
    """Resolve configuration for the current environment.

    Args:
        base_config: Common configuration regardless of environment
        options: ResolutionOptions or a mapping of its fields
        env: Environment lookup (default: os.environ.get)
        resolver: Fragment resolver (default: Python modules)

    Returns:
        Merged configuration dict

    Example:
        config = resolve({"name": "app"}, {"config_directory": "config"})
    """
    loader = ConfigLoader(options, resolver=resolver, env=env)
    return loader.resolve(base_config)


def load_config(
    config_directory: Union[str, os.PathLike],
    base_config: Optional[Dict[str, Any]] = None,
    *,
    env: Optional[EnvLookup] = None,
    resolver: Optional[FragmentResolver] = None,
    **options: Any,
) -> Dict[str, Any]:
    """Convenience function taking the config directory first.

    Example:
        config = load_config("config", include_root_index=True)
    """
    return resolve(
        base_config,
        {**options, "config_directory": config_directory},
        env=env,
        resolver=resolver,
    )
