"""Rich renderers for ServiceResult and for the todo list itself.

Results are dispatched by ``result.op`` in :func:`render_result`; unknown
ops fall through to a generic key-value renderer.  :func:`entry_table`
is shared with :class:`todoctl.output.view.TodoView`.
"""

from __future__ import annotations

import json as _json
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from todoctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from todoctl.services.result import ServiceResult

REMOVE_LABEL = "[remove]"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("text", "")) for item in items)

    return f"OK: {result.op}"


def entry_table(texts: Iterable[str], *, show_index: bool = True) -> Table:
    """Build the list view: one row per entry plus its remove control."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    if show_index:
        table.add_column("#", style="todo.index", justify="right", no_wrap=True)
    table.add_column("Todo", style="todo.text")
    table.add_column("", style="todo.remove", no_wrap=True)

    for i, text in enumerate(texts, start=1):
        # Text() keeps user input from being parsed as Rich markup.
        row: list[Any] = [str(i)] if show_index else []
        row.extend([Text(text), Text(REMOVE_LABEL)])
        table.add_row(*row)

    return table


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="todo.ok")
    op = Text(f"  {result.op}", style="todo.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="todo.key")
    console.print(k, Text(str(value)), sep="", end="")
    console.print()


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="todo.error")
    op = Text(f"  {result.op}", style="todo.op")
    console.print(label, op, Text(" — "), Text(msg))


def _render_mutation(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "text", d.get("text", ""))
    _field(console, "count", d.get("count", 0))


def _render_list(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print(Text("Nothing to do.", style="todo.empty"))
        return
    console.print(entry_table(str(item.get("text", "")) for item in items))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "add": _render_mutation,
    "remove": _render_mutation,
    "list": _render_list,
}
