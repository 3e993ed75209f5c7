"""Config merger for folding configuration fragments into an accumulator."""
import logging
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Tuple

from config_cascade.exceptions.config import ConfigMergeError


logger = logging.getLogger(__name__)


class ConfigMerger:
    """Deep merges configuration dictionaries in place.

    Merge rules:
    - Dicts: Merged recursively
    - Lists: Replaced wholesale by the source list
    - Scalars (int, str, bool, etc.): Overridden by value

    Values copied into the target are deep copies, so the merged result never
    shares mutable state with a source fragment.

    Example:
        target = {"logging": {"enabled": True, "level": "INFO"}, "hosts": ["a"]}
        source = {"logging": {"level": "DEBUG"}, "hosts": ["b", "c"]}

        merger.merge(target, source)
        target == {"logging": {"enabled": True, "level": "DEBUG"}, "hosts": ["b", "c"]}
    """

    def merge(self, target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
        """Deep merge source into target.

        Args:
            target: Accumulated configuration (lower priority, mutated)
            source: Fragment to fold in (higher priority, not modified)

        Returns:
            The same target object

        Raises:
            ConfigMergeError: Either argument is not a mapping
        """
        if not isinstance(target, dict) or not isinstance(source, Mapping):
            raise ConfigMergeError(
                f"Deep merge requires mappings, got "
                f"{type(target).__name__} and {type(source).__name__}"
            )

        # Explicit stack keeps arbitrarily deep fragments off the call stack
        stack: List[Tuple[Dict[str, Any], Mapping[str, Any]]] = [(target, source)]
        while stack:
            current, incoming = stack.pop()
            for key, value in incoming.items():
                existing = current.get(key)
                if isinstance(existing, dict) and isinstance(value, Mapping):
                    stack.append((existing, value))
                elif isinstance(value, Mapping):
                    current[key] = _plain_copy(value)
                else:
                    current[key] = deepcopy(value)

        logger.debug(
            "Configs merged",
            extra={"source_keys": len(source), "result_keys": len(target)},
        )

        return target

    def merge_under(self, target: Dict[str, Any], key: str, fragment: Any) -> Dict[str, Any]:
        """Merge a fragment under a single key of target.

        The key is created when absent, deep-merged when both sides are
        mappings and replaced otherwise.
        """
        return self.merge(target, {key: fragment})

    def merge_multiple(self, *configs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge multiple configs in order (left to right, right wins).

        Args:
            *configs: Multiple configs to merge (merged left to right)

        Returns:
            New merged config
        """
        result: Dict[str, Any] = {}
        for config in configs:
            self.merge(result, config)
        return result


def _plain_copy(value: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy a mapping into an independently owned plain dict."""
    result: Dict[str, Any] = {}
    stack: List[Tuple[Dict[str, Any], Mapping[str, Any]]] = [(result, value)]
    while stack:
        current, incoming = stack.pop()
        for key, item in incoming.items():
            if isinstance(item, Mapping):
                child: Dict[str, Any] = {}
                current[key] = child
                stack.append((child, item))
            else:
                current[key] = deepcopy(item)
    return result


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Convenience function for deep merging configs in place."""
    merger = ConfigMerger()
    return merger.merge(target, source)
