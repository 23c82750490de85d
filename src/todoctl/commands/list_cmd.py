"""Command: show the list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext


@click.command(
    "list",
    cls=TodoCommand,
    examples="""\
  todoctl list
  todoctl --json list
  todoctl -q list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """Show every todo, oldest first."""
    from todoctl.services.todo import TodoService

    app.emit(TodoService(app.runtime).list_items())
