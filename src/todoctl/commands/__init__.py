"""Subcommand modules for todoctl.

Provides register_commands() which uses deferred imports to keep
``todoctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from todoctl.commands.add import add
    from todoctl.commands.list_cmd import list_cmd
    from todoctl.commands.remove import remove
    from todoctl.commands.shell import shell

    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(list_cmd)
    cli.add_command(shell)
