"""Command: add a todo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext


@click.command(
    cls=TodoCommand,
    examples="""\
  todoctl add "Buy milk"
  todoctl --json add "Call the plumber\"""",
)
@click.argument("text")
@click.pass_obj
def add(app: AppContext, text: str) -> None:
    """Add TEXT to the list (surrounding whitespace is trimmed)."""
    from todoctl.services.todo import TodoService

    app.emit(TodoService(app.runtime).add(text))
