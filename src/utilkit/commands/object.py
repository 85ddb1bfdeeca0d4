"""Command group: object helpers (pick, omit, merge).

Objects are passed as JSON, e.g. ``'{"a": 1}'``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from utilkit.commands._base import UtkGroup
from utilkit.commands._values import JSON_VALUE

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.group(
    "object",
    cls=UtkGroup,
    examples="""\
        utilkit object pick '{"a":1,"b":2,"c":3}' a c
        utilkit object omit '{"a":1,"b":2}' b
        utilkit object merge '{"a":1}' '{"a":2,"b":3}'""",
)
def object_() -> None:
    """Select, drop, and merge object keys."""


@object_.command()
@click.argument("obj", type=JSON_VALUE)
@click.argument("keys", nargs=-1)
@click.pass_obj
def pick(app: AppContext, obj: Any, keys: tuple[str, ...]) -> None:
    """Keep only KEYS of OBJ."""
    app.emit(app.transforms.pick(obj, list(keys)))


@object_.command()
@click.argument("obj", type=JSON_VALUE)
@click.argument("keys", nargs=-1)
@click.pass_obj
def omit(app: AppContext, obj: Any, keys: tuple[str, ...]) -> None:
    """Copy OBJ without KEYS."""
    app.emit(app.transforms.omit(obj, list(keys)))


@object_.command()
@click.argument("sources", nargs=-1, type=JSON_VALUE)
@click.pass_obj
def merge(app: AppContext, sources: tuple[Any, ...]) -> None:
    """Shallow-merge SOURCES left to right; later keys win."""
    app.emit(app.transforms.merge(*sources))
