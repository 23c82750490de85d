"""Command: remove a todo by its text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext


@click.command(
    cls=TodoCommand,
    examples="""\
  todoctl remove "Buy milk"
  todoctl -q remove "Call the plumber\"""",
)
@click.argument("text")
@click.pass_obj
def remove(app: AppContext, text: str) -> None:
    """Remove the todo whose text is exactly TEXT."""
    from todoctl.services.todo import TodoService

    app.emit(TodoService(app.runtime).remove(text))
