"""TodoRuntime: the composition root.

Builds the one store, its notifier, the dispatcher, the persistence
adapter, and the plugin manager, then wires them together.  Services and
views receive the runtime (or the pieces they need) explicitly.

Data flow after :meth:`TodoRuntime.start`::

    front end -> Dispatcher.execute -> TodoStore mutation
              -> Notifier.notify_all -> {LocalStorage.save, plugins, views}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todoctl.infrastructure.notifier import Notifier
from todoctl.infrastructure.storage import (
    BlobStore,
    JsonFileBlobStore,
    LocalStorage,
    MemoryBlobStore,
)
from todoctl.infrastructure.store import TodoStore
from todoctl.plugins.manager import PluginManager
from todoctl.services.dispatcher import Dispatcher

if TYPE_CHECKING:
    from todoctl.config.settings import TodoSettings

logger = logging.getLogger(__name__)


class TodoRuntime:
    """Owns the process-wide store and everything subscribed to it.

    Constructed once at CLI startup from :class:`TodoSettings` and stored
    on the click context.  ``blobs`` overrides the blob store picked from
    settings (tests pass a :class:`MemoryBlobStore`).
    """

    def __init__(self, settings: TodoSettings, *, blobs: BlobStore | None = None) -> None:
        self._settings = settings
        self._notifier = Notifier()
        self._store = TodoStore(self._notifier)
        self._dispatcher = Dispatcher(self._store)
        self._blobs = blobs if blobs is not None else self._default_blobs()
        self._storage = LocalStorage(self._store, self._blobs, key=settings.storage.key)
        self._plugins = PluginManager()
        self._started = False

    def _default_blobs(self) -> BlobStore:
        if self._settings.storage.ephemeral:
            return MemoryBlobStore()
        return JsonFileBlobStore(self._settings.data_path)

    @property
    def settings(self) -> TodoSettings:
        return self._settings

    @property
    def store(self) -> TodoStore:
        return self._store

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    @property
    def storage(self) -> LocalStorage:
        return self._storage

    @property
    def plugins(self) -> PluginManager:
        return self._plugins

    @property
    def started(self) -> bool:
        return self._started

    def start(self, *, discover_plugins: bool = True) -> None:
        """Load persisted entries, then subscribe persistence and plugins.

        Loading happens before ``save`` is subscribed so a load never
        rewrites the blob it just read.  Raises RuntimeError on a second
        call: the wiring must exist exactly once.
        """
        if self._started:
            msg = "TodoRuntime.start() called twice; the store is already wired"
            raise RuntimeError(msg)
        self._storage.load()
        self._store.subscribe(self._storage.save)
        if discover_plugins:
            self._plugins.discover_and_load()
        self._plugins.attach(self._store)
        self._started = True
        logger.debug(
            "Runtime started with %d entries and %d plugins",
            len(self._store),
            len(self._plugins.list_plugin_names()),
        )
