"""Config file locator for finding source files within a config directory."""
import logging
import os
from pathlib import Path
from typing import Iterable, List, Tuple, Union


logger = logging.getLogger(__name__)

AGGREGATE_STEM = "index"

PathLike = Union[str, os.PathLike]


def is_directory(path: PathLike) -> bool:
    """Check whether path exists and is a directory.

    Missing paths, permission problems and non-directories all yield False.
    """
    try:
        return Path(path).is_dir()
    except (OSError, ValueError):
        return False


class ConfigLocator:
    """Locates configuration source files in a single directory.

    Search order:
    1. Aggregate files: {directory}/index{ext}, in extension order (only when requested)
    2. Named files: {directory}/*{ext}, sorted by file name

    Example:
        locator = ConfigLocator(extensions=(".py",))
        paths = locator.discover("/srv/app/config/staging", include_aggregate=True)
    """

    def __init__(
        self,
        extensions: Iterable[str] = (".py",),
        aggregate_stem: str = AGGREGATE_STEM,
    ):
        """Initialize config locator.

        Args:
            extensions: File suffixes treated as configuration sources
            aggregate_stem: Stem of the file merged at the directory's top level
        """
        self.extensions: Tuple[str, ...] = tuple(extensions)
        self.aggregate_stem = aggregate_stem

        logger.debug(
            "ConfigLocator initialized",
            extra={"extensions": list(self.extensions), "aggregate_stem": aggregate_stem},
        )

    def is_source(self, name: str) -> bool:
        """Check whether a file name carries a source extension."""
        return name.endswith(self.extensions)

    def is_aggregate(self, path: PathLike) -> bool:
        """Check whether path names the directory's aggregate file."""
        path = Path(path)
        return path.stem == self.aggregate_stem and self.is_source(path.name)

    def find_aggregates(self, directory: PathLike) -> List[Path]:
        """Find the aggregate files in directory.

        Args:
            directory: Directory to search

        Returns:
            Absolute paths of every existing aggregate file, in extension order
        """
        directory = Path(directory).resolve()
        return [
            candidate
            for candidate in (
                directory / f"{self.aggregate_stem}{extension}" for extension in self.extensions
            )
            if candidate.is_file()
        ]

    def discover(self, directory: PathLike, include_aggregate: bool = False) -> List[Path]:
        """List configuration source files in directory.

        Args:
            directory: Directory to scan (not recursive)
            include_aggregate: Prepend the aggregate files when present

        Returns:
            Absolute paths, aggregate files first in extension order, named
            files sorted by name
        """
        if not is_directory(directory):
            logger.debug(
                f"Config directory not found: {directory}",
                extra={"directory": str(directory)},
            )
            return []

        directory = Path(directory).resolve()

        result: List[Path] = []
        for name in sorted(os.listdir(directory)):
            if not self.is_source(name):
                continue
            path = directory / name
            if self.is_aggregate(path) or not path.is_file():
                continue
            result.append(path)

        if include_aggregate:
            # Aggregates load before their siblings so those can override them
            result = self.find_aggregates(directory) + result

        logger.debug(
            f"Discovered {len(result)} config file(s) in {directory}",
            extra={
                "directory": str(directory),
                "include_aggregate": include_aggregate,
                "files": [p.name for p in result],
            },
        )

        return result


def discover_config_files(
    directory: PathLike,
    include_aggregate: bool = False,
    extensions: Iterable[str] = (".py",),
) -> List[Path]:
    """Convenience function to discover config files.

    Args:
        directory: Directory to scan
        include_aggregate: Prepend the aggregate file when present
        extensions: File suffixes treated as configuration sources

    Returns:
        Ordered list of absolute file paths
    """
    locator = ConfigLocator(extensions=extensions)
    return locator.discover(directory, include_aggregate=include_aggregate)
