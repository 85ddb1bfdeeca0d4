"""Command group: string helpers (truncate, slugify)."""

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
        utilkit string truncate "A rather long sentence" 10
        utilkit string truncate "A rather long sentence" 10 --ellipsis "..."
        utilkit string slugify 'Hello, World!'""",
)
def string() -> None:
    """Truncate and slugify text."""


@string.command()
@click.argument("text")
@click.argument("max_length", type=JSON_VALUE)
@click.option("--ellipsis", default=None, help="Suffix for cut text (default from [strings] config).")
@click.pass_obj
def truncate(app: AppContext, text: str, max_length: Any, ellipsis: str | None) -> None:
    """Cut TEXT to at most MAX_LENGTH characters."""
    app.emit(app.transforms.truncate(text, max_length, ellipsis))


@string.command()
@click.argument("text")
@click.pass_obj
def slugify(app: AppContext, text: str) -> None:
    """Lowercase TEXT and hyphenate every run of other characters."""
    app.emit(app.transforms.slugify(text))
