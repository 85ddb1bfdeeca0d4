"""Command group: number helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from utilkit.commands._base import UtkGroup
from utilkit.commands._values import JSON_VALUE

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.group(
    cls=UtkGroup,
    examples="""\
        utilkit number clamp 15 0 10
        utilkit number clamp -- -4 0 10""",
)
def number() -> None:
    """Numeric helpers."""


@number.command()
@click.argument("value", type=JSON_VALUE)
@click.argument("low", type=JSON_VALUE)
@click.argument("high", type=JSON_VALUE)
@click.pass_obj
def clamp(app: AppContext, value: Any, low: Any, high: Any) -> None:
    """Constrain VALUE to [LOW, HIGH]."""
    app.emit(app.transforms.clamp(value, low, high))
