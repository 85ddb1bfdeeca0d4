"""Array predicates and transformations.

Arrays are ``list`` or ``tuple`` values; every helper returns a new
``list`` and never mutates its input.

Membership (``unique``, ``difference``, ``intersection``, ``union``) is
by equality for hashable items and by identity for unhashable ones, so
two distinct but equal lists are treated as different elements. Booleans
never match numbers: ``True`` and ``1`` are different elements.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from utilkit.core.errors import invalid_argument, require
from utilkit.core.types import is_array, is_integer


def _key(item: Any) -> tuple[bool, Any]:
    # True == 1 and hash(True) == hash(1); keep the two apart.
    return (type(item) is bool, item)


class _MembershipSet:
    """Set that falls back to identity for unhashable items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._hashed: set[Any] = set()
        self._ids: set[int] = set()
        self._keepalive: list[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        if isinstance(item, Hashable):
            try:
                self._hashed.add(_key(item))
                return
            except TypeError:
                pass  # e.g. a tuple holding a list
        self._ids.add(id(item))
        self._keepalive.append(item)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Hashable):
            try:
                return _key(item) in self._hashed
            except TypeError:
                pass
        return id(item) in self._ids


def _require_array(value: Any, function_name: str) -> Sequence[Any]:
    require(is_array(value), function_name, "an array", value)
    return value


def _require_size(size: Any, function_name: str) -> int:
    require(is_integer(size) and size > 0, function_name, "a positive integer size", size)
    return int(size)


def is_empty_array(value: Any) -> bool:
    _require_array(value, "is_empty_array")
    return len(value) == 0


def chunk(array: Any, size: Any) -> list[list[Any]]:
    """Split *array* into consecutive chunks of *size*; the last may be shorter.

    Examples:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    items = _require_array(array, "chunk")
    step = _require_size(size, "chunk")
    return [list(items[i : i + step]) for i in range(0, len(items), step)]


def chunk_count(array: Any, size: Any) -> int:
    items = _require_array(array, "chunk_count")
    step = _require_size(size, "chunk_count")
    return math.ceil(len(items) / step)


def chunk_at(array: Any, size: Any, index: Any) -> list[Any]:
    """Return the chunk at 0-based *index*, as :func:`chunk` would produce it."""
    items = _require_array(array, "chunk_at")
    step = _require_size(size, "chunk_at")
    count = math.ceil(len(items) / step)
    if not (is_integer(index) and 0 <= index < count):
        raise invalid_argument("chunk_at", f"an index in [0, {count})", index)
    start = int(index) * step
    return list(items[start : start + step])


def unique(array: Any) -> list[Any]:
    """Drop repeated elements, keeping first occurrences in order.

    Examples:
        >>> unique([1, 2, 2, 3, 4, 4, 5])
        [1, 2, 3, 4, 5]
    """
    items = _require_array(array, "unique")
    seen = _MembershipSet()
    result: list[Any] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def _flatten_into(out: list[Any], items: Iterable[Any], depth: float) -> None:
    for item in items:
        if depth > 0 and is_array(item):
            _flatten_into(out, item, depth - 1)
        else:
            out.append(item)


def flatten(array: Any, depth: Any = None) -> list[Any]:
    """Flatten nested arrays up to *depth* levels.

    ``None`` (or ``math.inf``) flattens completely; ``0`` returns a shallow copy.

    Examples:
        >>> flatten([1, [2, [3, [4]]]], 1)
        [1, 2, [3, [4]]]
        >>> flatten([1, [2, [3, [4]]]])
        [1, 2, 3, 4]
    """
    items = _require_array(array, "flatten")
    if depth is None or depth == math.inf:
        limit = math.inf
    else:
        require(
            is_integer(depth) and depth >= 0,
            "flatten",
            "a non-negative integer depth or None",
            depth,
        )
        limit = int(depth)
    result: list[Any] = []
    _flatten_into(result, items, limit)
    return result


def difference(*arrays: Any) -> list[Any]:
    """Elements of the first array absent from every later array.

    Duplicates within the first array are kept.
    """
    if not arrays:
        return []
    first, *rest = (_require_array(a, "difference") for a in arrays)
    excluded = _MembershipSet(item for other in rest for item in other)
    return [item for item in first if item not in excluded]


def intersection(*arrays: Any) -> list[Any]:
    """Distinct elements of the first array present in every later array."""
    if not arrays:
        return []
    first, *rest = (_require_array(a, "intersection") for a in arrays)
    others = [_MembershipSet(other) for other in rest]
    return [item for item in unique(first) if all(item in other for other in others)]


def union(*arrays: Any) -> list[Any]:
    """Distinct elements across all arrays, in order of first occurrence."""
    validated = [_require_array(a, "union") for a in arrays]
    return unique([item for items in validated for item in items])
