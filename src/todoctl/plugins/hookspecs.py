"""Pluggy hook specifications for todoctl change events."""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("todoctl")


class TodoctlHookSpec:
    """Hook specifications for the todoctl plugin system."""

    @hookspec
    def post_change(self, items: list[dict[str, Any]]) -> None:
        """Called after every store mutation with the full snapshot."""
