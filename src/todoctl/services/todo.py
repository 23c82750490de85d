"""TodoService: user-facing todo operations returning ServiceResult.

Input validation (blank text) happens here, before a command is built.
Duplicate adds and removals of missing text are not errors: they come
back ``ok`` with a warning.
"""

from __future__ import annotations

import logging
from typing import Any

from todoctl.domain.commands import (
    AddEntry,
    ClearEntries,
    CommandKind,
    RemoveByText,
    UpdateEntry,
)
from todoctl.domain.entry import Entry
from todoctl.services.base import BaseService
from todoctl.services.dispatcher import NOT_SUPPORTED
from todoctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class TodoService(BaseService):
    """Add, remove, and list entries in the runtime's store."""

    def add(self, text: str) -> ServiceResult:
        op = "add"
        cleaned = text.strip()
        if not cleaned:
            return ServiceResult.failure(op, "EMPTY_TEXT", "Todo text must not be blank")

        added = self._runtime.dispatcher.execute(AddEntry(payload=Entry.create(cleaned)))
        warnings: list[str] = []
        if not added:
            warnings.append(f"Already on the list: {cleaned}")
        return ServiceResult(
            ok=True,
            op=op,
            data={"text": cleaned, "added": bool(added), "count": len(self._runtime.store)},
            warnings=warnings,
        )

    def remove(self, text: str) -> ServiceResult:
        op = "remove"
        removed = self._runtime.dispatcher.execute(RemoveByText(payload=text))
        warnings: list[str] = []
        if not removed:
            warnings.append(f"Not on the list: {text}")
        return ServiceResult(
            ok=True,
            op=op,
            data={"text": text, "removed": bool(removed), "count": len(self._runtime.store)},
            warnings=warnings,
        )

    def list_items(self) -> ServiceResult:
        items: list[dict[str, Any]] = [
            {"index": i, "text": entry.text}
            for i, entry in enumerate(self._runtime.store.items, start=1)
        ]
        return ServiceResult(ok=True, op="list", data={"items": items, "count": len(items)})

    def update(self, payload: Any = None) -> ServiceResult:
        return self._reserved(UpdateEntry(payload=payload))

    def clear(self) -> ServiceResult:
        return self._reserved(ClearEntries())

    def _reserved(self, command: UpdateEntry | ClearEntries) -> ServiceResult:
        result = self._runtime.dispatcher.execute(command)
        kind = CommandKind(command.kind)
        if result is NOT_SUPPORTED:
            return ServiceResult.failure(
                kind.value,
                "NOT_SUPPORTED",
                f"'{kind.value}' is not supported yet",
            )
        return ServiceResult(ok=True, op=kind.value, data={"result": result})
