"""Subcommand modules for utilkit.

Provides register_commands() which uses deferred imports to keep
``utilkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``check`` command and the four helper groups on the root CLI."""
    from utilkit.commands.array import array
    from utilkit.commands.check import check
    from utilkit.commands.number import number
    from utilkit.commands.object import object_
    from utilkit.commands.string import string

    cli.add_command(check)
    cli.add_command(string)
    cli.add_command(array)
    cli.add_command(object_)
    cli.add_command(number)
