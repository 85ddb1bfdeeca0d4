"""CheckService — evaluate any registered predicate by name."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from utilkit.core import numbers, strings, types
from utilkit.core.arrays import is_empty_array
from utilkit.core.objects import is_empty_object
from utilkit.services.base import BaseService
from utilkit.services.result import (
    UNKNOWN_OPERATION,
    WRONG_ARITY,
    ServiceError,
    ServiceResult,
)

# name -> (predicate, extra positional parameter names)
PREDICATES: dict[str, tuple[Callable[..., bool], tuple[str, ...]]] = {
    "is_string": (types.is_string, ()),
    "is_number": (types.is_number, ()),
    "is_integer": (types.is_integer, ()),
    "is_infinity": (types.is_infinity, ()),
    "is_array": (types.is_array, ()),
    "is_object": (types.is_object, ()),
    "is_any_object": (types.is_any_object, ()),
    "is_function": (types.is_function, ()),
    "is_boolean": (types.is_boolean, ()),
    "is_null": (types.is_null, ()),
    "is_undefined": (types.is_undefined, ()),
    "is_symbol": (types.is_symbol, ()),
    "is_empty_string": (strings.is_empty_string, ()),
    "is_email": (strings.is_email, ()),
    "is_url": (strings.is_url, ()),
    "is_empty_array": (is_empty_array, ()),
    "is_empty_object": (is_empty_object, ()),
    "is_odd": (numbers.is_odd, ()),
    "is_even": (numbers.is_even, ()),
    "is_positive_number": (numbers.is_positive_number, ()),
    "is_negative_number": (numbers.is_negative_number, ()),
    "is_in_range": (numbers.is_in_range, ("low", "high")),
    "is_divisible_by": (numbers.is_divisible_by, ("divisor",)),
    "is_prime": (numbers.is_prime, ()),
}


def normalize_name(name: str) -> str:
    """Accept CLI-style ``is-email`` as well as ``is_email``."""
    return name.strip().lower().replace("-", "_")


class CheckService(BaseService):
    """Run predicates, reporting the boolean in ``data["result"]``."""

    def check(self, name: str, value: Any, *args: Any) -> ServiceResult:
        op = normalize_name(name)
        entry = PREDICATES.get(op)
        if entry is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=UNKNOWN_OPERATION,
                    message=f"Unknown predicate: {name}",
                    detail={"available": sorted(PREDICATES)},
                ),
            )
        predicate, params = entry
        if len(args) != len(params):
            expected = ", ".join(params) if params else "no extra arguments"
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=WRONG_ARITY,
                    message=f"{op} takes {len(params)} extra argument(s): {expected}",
                    detail={"params": list(params), "received": len(args)},
                ),
            )
        if op == "is_url":
            predicate = functools.partial(predicate, schemes=self.config.urls.schemes)
        return self._run(op, predicate, value, *args)

    @staticmethod
    def available() -> list[str]:
        return sorted(PREDICATES)
