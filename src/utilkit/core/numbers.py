"""Numeric predicates and helpers.

Only the primary value is validated. Auxiliary bounds and divisors are
the caller's responsibility and may produce degenerate (but non-failing)
results, e.g. ``is_in_range(5, 10, 0)`` is simply False.
"""

from __future__ import annotations

import math
from typing import Any

from utilkit.core.errors import require
from utilkit.core.types import is_integer, is_number

_FINITE = "a finite number"


def is_odd(number: Any) -> bool:
    require(is_number(number), "is_odd", _FINITE, number)
    return number % 2 != 0


def is_even(number: Any) -> bool:
    require(is_number(number), "is_even", _FINITE, number)
    return number % 2 == 0


def is_positive_number(value: Any) -> bool:
    require(is_number(value), "is_positive_number", _FINITE, value)
    return value > 0


def is_negative_number(value: Any) -> bool:
    require(is_number(value), "is_negative_number", _FINITE, value)
    return value < 0


def is_in_range(value: Any, low: Any, high: Any) -> bool:
    """Inclusive bounds check: ``low <= value <= high``."""
    require(is_number(value), "is_in_range", _FINITE, value)
    return low <= value <= high


def is_divisible_by(value: Any, divisor: Any) -> bool:
    """True when *value* leaves no remainder; a zero divisor is never a match."""
    require(is_number(value), "is_divisible_by", _FINITE, value)
    if divisor == 0:
        return False
    return value % divisor == 0


def is_prime(value: Any) -> bool:
    """Trial-division primality test.

    Non-integers raise :class:`~utilkit.core.errors.InvalidArgumentError`;
    integers below 2 are not prime.

    Examples:
        >>> [n for n in range(20) if is_prime(n)]
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    require(is_integer(value), "is_prime", "an integer", value)
    n = int(value)
    if n < 2:
        return False
    for divisor in range(2, math.isqrt(n) + 1):
        if n % divisor == 0:
            return False
    return True


def clamp(value: Any, low: Any, high: Any) -> Any:
    """Constrain *value* to ``[low, high]``.

    Examples:
        >>> clamp(15, 0, 10)
        10
        >>> clamp(-3, 0, 10)
        0
    """
    require(is_number(value), "clamp", _FINITE, value)
    return min(max(value, low), high)
