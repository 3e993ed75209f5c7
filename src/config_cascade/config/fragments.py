"""Fragment resolvers for Python and YAML configuration sources."""
import hashlib
import importlib.machinery
import importlib.util
import inspect
import logging
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Optional, Tuple

import yaml

from config_cascade.config.interfaces import Loaded, LoadFailure, LoadOutcome, NotFound


logger = logging.getLogger(__name__)

EXPORT_NAME = "config"


class _UncachedSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that always compiles from the file, never from __pycache__."""

    def get_code(self, fullname):
        source_path = self.get_filename(fullname)
        return self.source_to_code(self.get_data(source_path), source_path)


def _is_producer(value: Any) -> bool:
    """Check whether value is a function or bound method producing the fragment."""
    return inspect.isfunction(value) or inspect.ismethod(value)


def _invoke_producer(producer: Callable[..., Any], base_path: Path) -> Any:
    """Call a producer with no arguments, or with the base path if it needs one."""
    try:
        signature = inspect.signature(producer)
    except (TypeError, ValueError):
        return producer()

    required = [
        p for p in signature.parameters.values()
        if p.default is inspect.Parameter.empty
        and p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    if not required:
        return producer()
    if len(required) == 1:
        return producer(base_path)
    raise TypeError(
        f"Config producer {getattr(producer, '__name__', producer)!r} "
        f"takes {len(required)} required arguments, expected at most 1"
    )


class PythonFragmentResolver:
    """Evaluates Python source files and returns their ``config`` export.

    A module exports its fragment through a module-level ``config`` name:

        config = {"enabled": True}

    or a producer evaluated at load time:

        def config(base_path):
            return {"directory": str(base_path / "logs")}

    Only functions and bound methods are called; any other value, a class
    included, is the fragment itself. A module without a ``config`` name
    contributes an empty mapping.
    """

    extensions: Tuple[str, ...] = (".py",)

    def __init__(self, base_path: Optional[Path] = None, export_name: str = EXPORT_NAME):
        """Initialize Python fragment resolver.

        Args:
            base_path: Passed to producers that take one argument (default: cwd)
            export_name: Module attribute holding the fragment
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()
        self.export_name = export_name

    def load(self, path: Path) -> LoadOutcome:
        """Execute path as an isolated module and normalize its export."""
        path = Path(path)
        digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:16]
        module_name = f"_config_cascade_fragment_{digest}"

        logger.debug(f"Loading Python config: {path}", extra={"path": str(path)})

        spec = importlib.util.spec_from_file_location(
            module_name,
            str(path),
            loader=_UncachedSourceLoader(module_name, str(path)),
        )
        module = importlib.util.module_from_spec(spec)
        # Registered only while executing so dataclasses inside the source
        # can find their module
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
            value = getattr(module, self.export_name, {})
            if _is_producer(value):
                value = _invoke_producer(value, self.base_path)
            fragment = deepcopy(value)
        except SyntaxError as e:
            return LoadFailure(path, e, line_number=e.lineno, column_number=e.offset)
        except FileNotFoundError as e:
            # Only the source file itself vanishing counts as not found
            if e.filename == str(path):
                return NotFound(path)
            return LoadFailure(path, e)
        except Exception as e:
            return LoadFailure(path, e)
        finally:
            sys.modules.pop(module_name, None)

        return Loaded(path, fragment)


class YAMLFragmentResolver:
    """Loads YAML files into Python dictionaries."""

    extensions: Tuple[str, ...] = (".yaml", ".yml")

    def load(self, path: Path) -> LoadOutcome:
        """Load YAML file as a fragment.

        Empty documents load as an empty mapping.
        """
        path = Path(path)
        try:
            logger.debug(f"Loading YAML file: {path}", extra={"path": str(path)})

            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

        except FileNotFoundError:
            return NotFound(path)

        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            return LoadFailure(
                path,
                e,
                line_number=mark.line + 1 if mark is not None else None,
                column_number=mark.column + 1 if mark is not None else None,
            )

        except OSError as e:
            return LoadFailure(path, e)

        if data is None:
            logger.debug(f"YAML file is empty: {path}", extra={"path": str(path)})
            return Loaded(path, {})

        return Loaded(path, data)
