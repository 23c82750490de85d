"""Command: interactive session with a live list view.

The view subscribes to the store, so every successful add or remove
prints a fresh frame.  ``update`` and ``clear`` route through the
dispatcher and report that they are not supported yet.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.commands._base import TodoCommand
from todoctl.services.dispatcher import NOT_SUPPORTED

if TYPE_CHECKING:
    from todoctl.commands._context import AppContext
    from todoctl.output.view import TodoView

SHELL_HELP = """\
  add <text>   add a todo
  rm <text>    remove the todo with exactly this text
  ls           show the list again
  update       (not supported yet)
  clear        (not supported yet)
  help         show this help
  quit         leave the shell"""

_QUIT = frozenset({"quit", "exit", "q"})
_RESERVED = frozenset({"update", "clear"})


@click.command(
    cls=TodoCommand,
    examples="""\
  todoctl shell
  printf 'add Buy milk\\nls\\nquit\\n' | todoctl shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Edit the list interactively."""
    from todoctl.output.view import TodoView

    runtime = app.runtime
    view = TodoView(
        runtime.store,
        runtime.dispatcher,
        sink=click.echo,
        width=app.settings.display.width,
        show_index=app.settings.display.show_index,
    )
    view.attach()
    click.echo(view.render())
    try:
        while True:
            try:
                line = click.prompt("todo", default="", show_default=False, prompt_suffix="> ")
            except click.Abort:
                click.echo()
                break
            verb, _, rest = line.strip().partition(" ")
            if not verb:
                continue
            if verb.lower() in _QUIT:
                break
            _handle(app, view, verb.lower(), rest.strip())
    finally:
        view.detach()


def _handle(app: AppContext, view: TodoView, verb: str, arg: str) -> None:
    if verb in ("add", "a"):
        added = view.submit(arg)
        if added is None:
            click.echo("Nothing to add.", err=True)
        elif not added:
            click.echo(f"Already on the list: {arg}", err=True)
    elif verb in ("rm", "remove", "del"):
        if not view.remove(arg):
            click.echo(f"Not on the list: {arg}", err=True)
    elif verb in ("ls", "list"):
        click.echo(view.render())
    elif verb == "help":
        click.echo(SHELL_HELP)
    elif verb in _RESERVED:
        result = app.runtime.dispatcher.execute({"kind": verb, "payload": arg or None})
        if result is NOT_SUPPORTED:
            click.echo(f"'{verb}' is not supported yet.", err=True)
    else:
        click.echo(f"Unknown command: {verb} (try 'help')", err=True)
