"""Abstract interfaces for configuration fragment resolution.

Defines the contract between the cascade and whatever turns a source file
into configuration data. Allows alternative source formats (and mocks in
tests) without touching the cascade itself.
"""
from abc import abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol, Tuple, Union


@dataclass(frozen=True)
class Loaded:
    """Source file evaluated successfully.

    Attributes:
        path: File that was loaded
        fragment: Plain configuration data (producers already invoked)
    """
    path: Path
    fragment: Any


@dataclass(frozen=True)
class NotFound:
    """Source file disappeared between discovery and loading."""
    path: Path


@dataclass(frozen=True)
class LoadFailure:
    """Source file exists but could not be evaluated.

    Attributes:
        path: Offending file
        error: Exception raised while reading or evaluating it
        line_number: Line of the failure, when known
        column_number: Column of the failure, when known
    """
    path: Path
    error: Exception
    line_number: Optional[int] = None
    column_number: Optional[int] = None


LoadOutcome = Union[Loaded, NotFound, LoadFailure]


class FragmentResolver(Protocol):
    """Protocol for turning one configuration source file into a fragment."""

    extensions: Tuple[str, ...]

    @abstractmethod
    def load(self, path: Path) -> LoadOutcome:
        """Load a single source file.

        Args:
            path: Absolute path of a discovered source file

        Returns:
            Loaded, NotFound or LoadFailure
        """
        ...
