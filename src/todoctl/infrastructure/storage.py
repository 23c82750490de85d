"""Persistence adapter: mirrors the store into a key-value blob store.

The blob format is a JSON array of ``{"text": str}`` objects stored
under one fixed key.  :class:`LocalStorage` is registered as a store
subscriber, so every mutation rewrites the full snapshot (never a diff).

INVARIANT: Malformed or missing persisted data never reaches the store.
``load()`` logs and leaves the store untouched instead of raising.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, TypeAdapter, ValidationError

if TYPE_CHECKING:
    from todoctl.infrastructure.store import TodoStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todoList"


# ---------------------------------------------------------------------------
# Blob stores
# ---------------------------------------------------------------------------


class BlobStore(Protocol):
    """Minimal string key-value store (the ``localStorage`` shape)."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryBlobStore:
    """Dict-backed blob store. Contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileBlobStore:
    """One UTF-8 file per key under *root*: ``<root>/<key>.json``."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        """Resolve the file backing *key*, refusing keys that escape *root*."""
        if not key or key in (".", ".."):
            msg = f"Invalid storage key: {key!r}"
            raise ValueError(msg)
        path = self._root / f"{key}.json"
        if not path.resolve().is_relative_to(self._root.resolve()):
            msg = f"Storage key escapes data directory: {key!r}"
            raise ValueError(msg)
        return path

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Blob %s is not valid UTF-8; treating as absent", path)
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")


# ---------------------------------------------------------------------------
# Persisted record schema
# ---------------------------------------------------------------------------


class EntryRecord(BaseModel):
    """One persisted entry. Unknown keys (e.g. ``completed``) are ignored."""

    model_config = {"extra": "ignore"}

    text: str


_RECORDS = TypeAdapter(list[EntryRecord])


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------


class LocalStorage:
    """Loads and saves the store's full contents under a fixed key."""

    def __init__(
        self,
        store: TodoStore,
        blobs: BlobStore,
        *,
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._store = store
        self._blobs = blobs
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> bool:
        """Replace the store contents with the persisted snapshot.

        Returns True if a snapshot was applied.  A missing key or a blob
        that isn't a JSON array of ``{"text": str}`` leaves the store as
        it was and returns False.
        """
        raw = self._blobs.get_item(self._key)
        if raw is None:
            logger.debug("No persisted snapshot under %r", self._key)
            return False
        try:
            records = _RECORDS.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring malformed snapshot under %r (%d errors)",
                self._key,
                exc.error_count(),
            )
            return False
        self._store.replace_all([{"text": record.text} for record in records])
        logger.debug("Loaded %d entries from %r", len(records), self._key)
        return True

    def save(self) -> None:
        """Serialize the current snapshot and write it under the key."""
        payload = [{"text": entry.text} for entry in self._store.items]
        self._blobs.set_item(self._key, json.dumps(payload, ensure_ascii=False))
