"""Object (mapping) predicates and shallow transformations.

All helpers return a new ``dict``; inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utilkit.core.errors import require
from utilkit.core.types import is_array, is_object


def _hashable(key: Any) -> bool:
    try:
        hash(key)
    except TypeError:
        return False
    return True


def _require_object(value: Any, function_name: str) -> Mapping[Any, Any]:
    require(is_object(value), function_name, "an object", value)
    return value


def is_empty_object(value: Any) -> bool:
    return len(_require_object(value, "is_empty_object")) == 0


def pick(obj: Any, keys: Any) -> dict[Any, Any]:
    """Keep only the *keys* that exist on *obj*.

    Unhashable keys can never be present and are skipped.

    Examples:
        >>> pick({"a": 1, "b": 2, "c": 3}, ["a", "c", "z"])
        {'a': 1, 'c': 3}
    """
    source = _require_object(obj, "pick")
    require(is_array(keys), "pick", "an array of keys", keys)
    return {key: source[key] for key in keys if _hashable(key) and key in source}


def omit(obj: Any, keys: Any) -> dict[Any, Any]:
    """Copy *obj* without the listed *keys*; unhashable keys are ignored."""
    source = _require_object(obj, "omit")
    require(is_array(keys), "omit", "an array of keys", keys)
    dropped = {key for key in keys if _hashable(key)}
    return {key: value for key, value in source.items() if key not in dropped}


def merge(*sources: Any) -> dict[Any, Any]:
    """Shallow left-to-right merge; later keys win.

    Examples:
        >>> merge({"a": 1}, {"a": 2, "b": 3})
        {'a': 2, 'b': 3}
    """
    validated = [_require_object(source, "merge") for source in sources]
    merged: dict[Any, Any] = {}
    for source in validated:
        merged.update(source)
    return merged
