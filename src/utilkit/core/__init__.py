"""Core layer — predicates, transformations, and timing wrappers.

This layer depends only on stdlib and pydantic.
It must never import from config, services, output, or commands.
"""

from utilkit.core.arrays import (
    chunk,
    chunk_at,
    chunk_count,
    difference,
    flatten,
    intersection,
    is_empty_array,
    union,
    unique,
)
from utilkit.core.clone import CloneStrategy, clone_strategy, deep_clone
from utilkit.core.errors import InvalidArgumentError, invalid_argument
from utilkit.core.numbers import (
    clamp,
    is_divisible_by,
    is_even,
    is_in_range,
    is_negative_number,
    is_odd,
    is_positive_number,
    is_prime,
)
from utilkit.core.objects import is_empty_object, merge, omit, pick
from utilkit.core.strings import is_email, is_empty_string, is_url, slugify, truncate
from utilkit.core.timing import Debouncer, Throttler, debounce, defer, throttle
from utilkit.core.types import (
    UNDEFINED,
    is_any_object,
    is_array,
    is_boolean,
    is_function,
    is_infinity,
    is_integer,
    is_null,
    is_number,
    is_object,
    is_string,
    is_symbol,
    is_undefined,
    kind_of,
)

__all__ = [
    "UNDEFINED",
    "CloneStrategy",
    "Debouncer",
    "InvalidArgumentError",
    "Throttler",
    "chunk",
    "chunk_at",
    "chunk_count",
    "clamp",
    "clone_strategy",
    "debounce",
    "deep_clone",
    "defer",
    "difference",
    "flatten",
    "intersection",
    "invalid_argument",
    "is_any_object",
    "is_array",
    "is_boolean",
    "is_divisible_by",
    "is_email",
    "is_empty_array",
    "is_empty_object",
    "is_empty_string",
    "is_even",
    "is_function",
    "is_in_range",
    "is_infinity",
    "is_integer",
    "is_negative_number",
    "is_null",
    "is_number",
    "is_object",
    "is_odd",
    "is_positive_number",
    "is_prime",
    "is_string",
    "is_symbol",
    "is_undefined",
    "is_url",
    "kind_of",
    "merge",
    "omit",
    "pick",
    "slugify",
    "throttle",
    "truncate",
    "union",
    "unique",
]
