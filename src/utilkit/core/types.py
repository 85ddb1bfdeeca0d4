"""Type predicates — runtime shape classification of arbitrary values.

Every predicate takes one value and returns a bool. None of them ever
raise, whatever they are given.
"""

from __future__ import annotations

import math
import numbers
from collections import UserString
from collections.abc import Mapping
from enum import Enum
from typing import Any, Final

_PRIMITIVES: tuple[type, ...] = (str, bytes, bool, numbers.Number)


class _Undefined:
    """Marker for a value that was never provided."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


def is_string(value: Any) -> bool:
    """Text, or a boxed-text wrapper such as :class:`collections.UserString`."""
    return isinstance(value, (str, UserString))


def is_number(value: Any) -> bool:
    """A finite real number. ``bool`` is not a number, nor are NaN and ±inf."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def is_integer(value: Any) -> bool:
    """A finite number equal to its floor (``3.0`` counts)."""
    return is_number(value) and math.floor(value) == value


def is_infinity(value: Any) -> bool:
    """Exactly positive or negative infinity."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isinf(value)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """A plain keyed container (any :class:`~collections.abc.Mapping`)."""
    return isinstance(value, Mapping)


def is_any_object(value: Any) -> bool:
    """Any composite non-null value: mappings, sequences, dates, patterns, instances.

    Primitives, symbols, ``None``, and functions are excluded.
    """
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, _PRIMITIVES) or is_symbol(value):
        return False
    return not is_function(value)


def is_function(value: Any) -> bool:
    return callable(value)


def is_boolean(value: Any) -> bool:
    return value is True or value is False


def is_null(value: Any) -> bool:
    return value is None


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_symbol(value: Any) -> bool:
    """A unique named token, i.e. an :class:`enum.Enum` member."""
    return isinstance(value, Enum)


def kind_of(value: Any) -> str:
    """Name the runtime kind of *value* for diagnostics.

    Examples:
        >>> kind_of(None)
        'null'
        >>> kind_of("abc")
        'str'
        >>> kind_of([1, 2])
        'list'
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    return type(value).__name__
