"""Click parameter type for helper inputs given on the command line.

Arguments are parsed as JSON so arrays, objects, numbers, booleans, and
null can be passed verbatim. Anything that is not valid JSON is taken as
a plain string, so ``utilkit check is-email a@b.co`` needs no quoting.
"""

from __future__ import annotations

import json
from typing import Any

import click


class JsonValue(click.ParamType):
    """JSON literal, falling back to the raw string."""

    name = "json"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if not isinstance(value, str):
            return value
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value


JSON_VALUE = JsonValue()
