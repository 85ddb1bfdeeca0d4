"""Deep clone with an explicit, closed set of copy strategies.

Only the kinds named in :class:`CloneStrategy` are rebuilt. Anything
else is classified ``OPAQUE`` and returned as-is, so the clone aliases it.
"""

from __future__ import annotations

import datetime as dt
import re
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from utilkit.core.types import UNDEFINED, is_array, is_object

_PRIMITIVE_TYPES: tuple[type, ...] = (str, bytes, int, float, complex, bool)


class CloneStrategy(StrEnum):
    """How :func:`deep_clone` treats a value."""

    PRIMITIVE = "primitive"
    DATE = "date"
    PATTERN = "pattern"
    ARRAY = "array"
    OBJECT = "object"
    OPAQUE = "opaque"


def clone_strategy(value: Any) -> CloneStrategy:
    """Classify *value* into the strategy :func:`deep_clone` applies to it."""
    if value is None or value is UNDEFINED or isinstance(value, _PRIMITIVE_TYPES):
        return CloneStrategy.PRIMITIVE
    if isinstance(value, (dt.date, dt.time)):
        return CloneStrategy.DATE
    if isinstance(value, re.Pattern):
        return CloneStrategy.PATTERN
    if is_array(value):
        return CloneStrategy.ARRAY
    if is_object(value):
        return CloneStrategy.OBJECT
    return CloneStrategy.OPAQUE


def deep_clone(value: Any) -> Any:
    """Recursively rebuild *value* so the result shares no mutable structure.

    - Primitives and ``None`` pass through.
    - ``date``/``datetime``/``time`` become new instances of the same instant.
    - Compiled patterns are recompiled from the same pattern and flags.
      Patterns are immutable and ``re`` caches compilations, so the clone
      may be the very same object.
    - Lists and tuples are cloned element-wise, keeping their type.
    - Mappings are cloned key-wise into a new ``dict``.
    - Everything else is returned unchanged (aliased).

    Self-referencing containers are supported; the clone keeps the cycle.
    A tuple is memoized only once built, so in a cycle that runs through a
    tuple the cycle closes on the enclosing list or dict clone.
    """
    return _clone(value, {})


def _clone(value: Any, memo: dict[int, Any]) -> Any:
    strategy = clone_strategy(value)
    if strategy in (CloneStrategy.PRIMITIVE, CloneStrategy.OPAQUE):
        return value
    if strategy is CloneStrategy.DATE:
        return value.replace()
    if strategy is CloneStrategy.PATTERN:
        return re.compile(value.pattern, value.flags)

    key = id(value)
    if key in memo:
        return memo[key]

    if strategy is CloneStrategy.ARRAY:
        if isinstance(value, tuple):
            cloned = tuple(_clone(item, memo) for item in value)
            memo[key] = cloned
            return cloned
        cloned_list: list[Any] = []
        memo[key] = cloned_list
        cloned_list.extend(_clone(item, memo) for item in value)
        return cloned_list

    source: Mapping[Any, Any] = value
    cloned_dict: dict[Any, Any] = {}
    memo[key] = cloned_dict
    for k, v in source.items():
        cloned_dict[k] = _clone(v, memo)
    return cloned_dict
