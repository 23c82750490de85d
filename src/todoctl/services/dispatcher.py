"""Dispatcher: routes a command to the matching store operation.

``add`` and ``remove-by-text`` return the store's bool.  ``update`` and
``clear`` are declared but have no agreed behavior yet; they answer
:data:`NOT_SUPPORTED` without touching the store.  Anything else is a
no-op returning None.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Literal

from todoctl.domain.commands import (
    AddEntry,
    ClearEntries,
    RemoveByText,
    UpdateEntry,
    parse_command,
)

if TYPE_CHECKING:
    from todoctl.domain.commands import Command
    from todoctl.infrastructure.store import TodoStore

logger = logging.getLogger(__name__)


class _Unsupported(Enum):
    NOT_SUPPORTED = "not-supported"

    def __repr__(self) -> str:
        return "NOT_SUPPORTED"


NOT_SUPPORTED: Final = _Unsupported.NOT_SUPPORTED
"""Result for command kinds that exist but are not implemented yet."""

DispatchResult = bool | Literal[_Unsupported.NOT_SUPPORTED] | None


class Dispatcher:
    """Executes commands against a single :class:`TodoStore`."""

    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, command: Command | Mapping[str, Any] | object) -> DispatchResult:
        """Run *command* and return the store operation's result.

        Raw ``{"kind", "payload"}`` mappings are parsed first.  Unknown
        kinds and unrecognised objects return None and never raise.
        """
        if isinstance(command, Mapping):
            command = parse_command(command)

        match command:
            case AddEntry(payload=entry):
                return self._store.add(entry)
            case RemoveByText(payload=text):
                return self._store.remove_by_text(text)
            case UpdateEntry() | ClearEntries():
                logger.info("Command %r is not supported yet", command.kind)
                return NOT_SUPPORTED
            case _:
                return None
