"""Rich Console factory and theme for utilkit output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UTILKIT_THEME = Theme(
    {
        "utk.ok": "bold green",
        "utk.error": "bold red",
        "utk.warning": "bold yellow",
        "utk.op": "bold cyan",
        "utk.key": "dim",
        "utk.true": "green",
        "utk.false": "red",
        "utk.index": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=UTILKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_bool(value: object) -> str:
    """Return the Rich style for a predicate outcome; non-bools get none."""
    if value is True:
        return "utk.true"
    if value is False:
        return "utk.false"
    return ""
