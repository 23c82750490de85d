"""TodoView: the presentation adapter.

Subscribed to the store, it re-renders the whole list on every change.
Input flows the other way: :meth:`TodoView.submit` and
:meth:`TodoView.remove` turn user actions into dispatcher commands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.text import Text

from todoctl.domain.commands import AddEntry, RemoveByText
from todoctl.domain.entry import Entry
from todoctl.output.console import create_console, get_output
from todoctl.output.renderers import entry_table

if TYPE_CHECKING:
    from todoctl.infrastructure.store import TodoStore
    from todoctl.services.dispatcher import Dispatcher


class TodoView:
    """Renders the store as a table and forwards input as commands.

    ``sink`` receives each rendered frame (the shell passes
    ``click.echo``); ``last_frame`` always holds the latest one.
    """

    def __init__(
        self,
        store: TodoStore,
        dispatcher: Dispatcher,
        *,
        sink: Callable[[str], object] | None = None,
        width: int | None = None,
        show_index: bool = True,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher
        self._sink = sink
        self._width = width
        self._show_index = show_index
        self.last_frame = ""
        self.render_count = 0

    def attach(self) -> None:
        self._store.subscribe(self.on_change)

    def detach(self) -> None:
        self._store.unsubscribe(self.on_change)

    def on_change(self) -> None:
        """Notifier callback: full re-render from a fresh snapshot."""
        self.last_frame = self.render()
        self.render_count += 1
        if self._sink is not None:
            self._sink(self.last_frame)

    def render(self) -> str:
        console = create_console(width=self._width)
        texts = [entry.text for entry in self._store.items]
        if texts:
            console.print(entry_table(texts, show_index=self._show_index))
        else:
            console.print(Text("Nothing to do.", style="todo.empty"))
        return get_output(console).rstrip("\n")

    def submit(self, raw: str) -> bool | None:
        """Add trimmed *raw* text. Blank input dispatches nothing."""
        text = raw.strip()
        if not text:
            return None
        return bool(self._dispatcher.execute(AddEntry(payload=Entry.create(text))))

    def remove(self, text: str) -> bool:
        """The remove control for the entry keyed by *text*."""
        return bool(self._dispatcher.execute(RemoveByText(payload=text)))
