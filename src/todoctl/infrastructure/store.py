"""TodoStore: the single authoritative collection of entries.

The store owns its entries and a private :class:`Notifier`.  Every
successful mutation runs ``mutate -> notify -> return``: by the time
``add``/``remove_by_text``/``replace_all`` return, all subscribers
(persistence included) have already seen the new state.

Exactly one store exists per process.  It is built by the composition
root (:class:`todoctl.infrastructure.runtime.TodoRuntime`) and handed to
collaborators explicitly; there is no module-level instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from todoctl.domain.entry import Entry
from todoctl.infrastructure.notifier import Callback, Notifier

logger = logging.getLogger(__name__)


class TodoStore:
    """Unique-by-text entries in insertion order.

    Read access goes through :attr:`items`, which returns a copy.
    Nothing outside this class touches ``_entries``.
    """

    def __init__(self, notifier: Notifier | None = None) -> None:
        self._entries: dict[str, Entry] = {}
        self._notifier = notifier if notifier is not None else Notifier()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def items(self) -> list[Entry]:
        """Snapshot of the current entries, oldest first."""
        return list(self._entries.values())

    def find_by_text(self, text: str) -> Entry | None:
        _require_text(text)
        return self._entries.get(text)

    def exists(self, entry: Entry) -> bool:
        _require_entry(entry)
        return entry.text in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.items)

    def __contains__(self, entry: object) -> bool:
        return isinstance(entry, Entry) and entry.text in self._entries

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, entry: Entry) -> bool:
        """Insert *entry*. Returns False (and stays silent) on a duplicate."""
        _require_entry(entry)
        if entry.text in self._entries:
            return False
        self._entries[entry.text] = entry
        logger.debug("Added entry %r", entry.text)
        self._notifier.notify_all()
        return True

    def remove_by_text(self, text: str) -> bool:
        """Remove the entry keyed by *text*. Returns False if absent."""
        _require_text(text)
        if self._entries.pop(text, None) is None:
            return False
        logger.debug("Removed entry %r", text)
        self._notifier.notify_all()
        return True

    def replace_all(self, entries: Iterable[Entry | Mapping[str, Any]]) -> None:
        """Swap the whole collection for *entries*, notifying once.

        Each input is rebuilt as a fresh :class:`Entry` from its ``text``
        alone, so extra fields from persisted records are dropped.
        Duplicates collapse first-wins: the first occurrence keeps its
        position, later ones are skipped.
        """
        fresh: dict[str, Entry] = {}
        for raw in entries:
            entry = _coerce_entry(raw)
            fresh.setdefault(entry.text, entry)
        self._entries = fresh
        logger.debug("Replaced store contents with %d entries", len(fresh))
        self._notifier.notify_all()

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def subscribe(self, callback: Callback) -> None:
        self._notifier.register(callback)

    def unsubscribe(self, callback: Callback) -> None:
        self._notifier.unregister(callback)


def _require_entry(entry: object) -> None:
    if not isinstance(entry, Entry):
        msg = f"Expected an Entry, got {type(entry).__name__}"
        raise TypeError(msg)


def _require_text(text: object) -> None:
    if not isinstance(text, str):
        msg = f"Expected entry text as str, got {type(text).__name__}"
        raise TypeError(msg)


def _coerce_entry(raw: Entry | Mapping[str, Any]) -> Entry:
    if isinstance(raw, Entry):
        return Entry(text=raw.text)
    if isinstance(raw, Mapping):
        return Entry.model_validate(dict(raw))
    msg = f"Expected an Entry or a mapping with 'text', got {type(raw).__name__}"
    raise TypeError(msg)
