"""Plugin discovery, loading, and change fan-out.

Plugins are pip-installed packages exposing a ``todoctl.plugins`` entry
point, or objects registered directly.  The manager plugs into the
store's notifier through :meth:`PluginManager.on_change`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pluggy

from todoctl.plugins.hookspecs import TodoctlHookSpec

if TYPE_CHECKING:
    from todoctl.infrastructure.store import TodoStore

PROJECT_NAME = "todoctl"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(TodoctlHookSpec)
        self._store: TodoStore | None = None
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins. Returns the names of all registered plugins."""
        try:
            self._pm.load_setuptools_entrypoints(f"{PROJECT_NAME}.plugins")
        except Exception:
            logger.warning("Plugin entry-point discovery failed", exc_info=True)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Store bridge
    # ------------------------------------------------------------------

    def attach(self, store: TodoStore) -> None:
        """Subscribe to *store* so plugins see every change."""
        self._store = store
        store.subscribe(self.on_change)

    def on_change(self) -> None:
        """Notifier callback: forward the current snapshot to ``post_change``."""
        if self._store is None:
            return
        items = [entry.model_dump() for entry in self._store.items]
        try:
            self._pm.hook.post_change(items=items)
        except Exception:
            logger.warning("post_change hook failed", exc_info=True)
