"""User intents routed by the dispatcher.

The command set is closed: every variant is a frozen model tagged by a
``kind`` literal, and :data:`Command` is the discriminated union over
them.  Raw ``{"kind": ..., "payload": ...}`` mappings (from the shell or
any other front end) go through :func:`parse_command`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from todoctl.domain.entry import Entry

logger = logging.getLogger(__name__)


class CommandKind(StrEnum):
    """Names of the supported command kinds."""

    ADD = "add"
    REMOVE_BY_TEXT = "remove-by-text"
    UPDATE = "update"
    CLEAR = "clear"


class AddEntry(BaseModel):
    """Insert an entry unless an equal one is already stored."""

    model_config = {"frozen": True}

    kind: Literal["add"] = "add"
    payload: Entry


class RemoveByText(BaseModel):
    """Remove the entry whose text matches ``payload``."""

    model_config = {"frozen": True}

    kind: Literal["remove-by-text"] = "remove-by-text"
    payload: str


class UpdateEntry(BaseModel):
    """Reserved. The payload shape is not defined yet."""

    model_config = {"frozen": True}

    kind: Literal["update"] = "update"
    payload: Any = None


class ClearEntries(BaseModel):
    """Reserved."""

    model_config = {"frozen": True}

    kind: Literal["clear"] = "clear"
    payload: Any = None


Command = Annotated[
    AddEntry | RemoveByText | UpdateEntry | ClearEntries,
    Field(discriminator="kind"),
]

_COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)

_KINDS = frozenset(kind.value for kind in CommandKind)


def parse_command(raw: Mapping[str, Any]) -> Command | None:
    """Build a command variant from a raw mapping.

    Returns ``None`` for a kind outside :class:`CommandKind`.  A known
    kind with a malformed payload raises ``pydantic.ValidationError``:
    that is a caller bug, not user input.

    An ``add`` payload may be an :class:`Entry`, a ``{"text": ...}``
    mapping, or a bare string.
    """
    kind = raw.get("kind")
    if not isinstance(kind, str) or kind not in _KINDS:
        logger.debug("Ignoring unknown command kind: %r", kind)
        return None

    kind = CommandKind(kind).value
    payload = raw.get("payload")
    if kind == CommandKind.ADD and isinstance(payload, str):
        payload = Entry.create(payload)
    return _COMMAND_ADAPTER.validate_python({"kind": kind, "payload": payload})
