"""Command group: array helpers.

Arrays are passed as JSON, e.g. ``'[1, [2, 3]]'``.
"""

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
        utilkit array chunk '[1,2,3,4,5]' 2
        utilkit array chunk-at '[1,2,3,4,5]' 2 1
        utilkit array unique '[1,2,2,3]'
        utilkit array flatten '[1,[2,[3,[4]]]]' --depth 1
        utilkit array difference '[1,2,3]' '[2]'
        utilkit array union '[1,2]' '[2,3]'""",
)
def array() -> None:
    """Chunk, de-duplicate, flatten, and combine arrays."""


@array.command()
@click.argument("items", type=JSON_VALUE)
@click.argument("size", type=JSON_VALUE)
@click.pass_obj
def chunk(app: AppContext, items: Any, size: Any) -> None:
    """Split ITEMS into chunks of SIZE."""
    app.emit(app.transforms.chunk(items, size))


@array.command("chunk-count")
@click.argument("items", type=JSON_VALUE)
@click.argument("size", type=JSON_VALUE)
@click.pass_obj
def chunk_count(app: AppContext, items: Any, size: Any) -> None:
    """Number of chunks of SIZE that ITEMS splits into."""
    app.emit(app.transforms.chunk_count(items, size))


@array.command("chunk-at")
@click.argument("items", type=JSON_VALUE)
@click.argument("size", type=JSON_VALUE)
@click.argument("index", type=JSON_VALUE)
@click.pass_obj
def chunk_at(app: AppContext, items: Any, size: Any, index: Any) -> None:
    """The INDEX-th chunk of SIZE from ITEMS."""
    app.emit(app.transforms.chunk_at(items, size, index))


@array.command()
@click.argument("items", type=JSON_VALUE)
@click.pass_obj
def unique(app: AppContext, items: Any) -> None:
    """Drop repeated elements, keeping first occurrences."""
    app.emit(app.transforms.unique(items))


@array.command()
@click.argument("items", type=JSON_VALUE)
@click.option("--depth", type=JSON_VALUE, default=None, help="Levels to flatten (default: all).")
@click.pass_obj
def flatten(app: AppContext, items: Any, depth: Any) -> None:
    """Flatten nested arrays in ITEMS."""
    app.emit(app.transforms.flatten(items, depth))


@array.command()
@click.argument("arrays", nargs=-1, type=JSON_VALUE)
@click.pass_obj
def difference(app: AppContext, arrays: tuple[Any, ...]) -> None:
    """Elements of the first array missing from all the others."""
    app.emit(app.transforms.difference(*arrays))


@array.command()
@click.argument("arrays", nargs=-1, type=JSON_VALUE)
@click.pass_obj
def intersection(app: AppContext, arrays: tuple[Any, ...]) -> None:
    """Elements of the first array present in all the others."""
    app.emit(app.transforms.intersection(*arrays))


@array.command()
@click.argument("arrays", nargs=-1, type=JSON_VALUE)
@click.pass_obj
def union(app: AppContext, arrays: tuple[Any, ...]) -> None:
    """Distinct elements across all ARRAYS."""
    app.emit(app.transforms.union(*arrays))
