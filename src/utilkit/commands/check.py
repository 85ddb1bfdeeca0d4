"""Standalone command: evaluate a predicate against a value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from utilkit.commands._base import UtkCommand
from utilkit.commands._values import JSON_VALUE

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


def _list_predicates(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value:
        return
    from utilkit.services.check import CheckService

    for name in CheckService.available():
        click.echo(name.replace("_", "-"))
    ctx.exit(0)


@click.command(
    cls=UtkCommand,
    examples="""\
        utilkit check is-email someone@example.com
        utilkit check is-url https://example.com
        utilkit check is-prime 97
        utilkit check is-in-range 5 1 10
        utilkit check is-empty-array '[]'
        utilkit check is-negative-number -- -3
        utilkit --json check is-divisible-by 12 4""",
)
@click.option(
    "--list",
    "list_",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_list_predicates,
    help="List available predicates and exit.",
)
@click.argument("predicate")
@click.argument("value", type=JSON_VALUE)
@click.argument("args", nargs=-1, type=JSON_VALUE)
@click.pass_obj
def check(app: AppContext, predicate: str, value: Any, args: tuple[Any, ...]) -> None:
    """Evaluate PREDICATE against VALUE (JSON, or a plain string).

    Extra ARGS are passed through for predicates that take them
    (is-in-range LOW HIGH, is-divisible-by DIVISOR).
    """
    app.emit(app.checks.check(predicate, value, *args))
