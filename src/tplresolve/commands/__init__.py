"""Subcommand modules for tplresolve.

Provides register_commands() which uses deferred imports to keep
``tplresolve --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``resolve`` group and the ``serve`` command on the root group."""
    from tplresolve.commands.resolve import resolve
    from tplresolve.commands.serve import serve

    cli.add_command(resolve)
    cli.add_command(serve)
