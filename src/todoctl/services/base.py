"""BaseService: foundation for runtime-backed services.

Every service receives the :class:`TodoRuntime` at construction time and
reaches the store and dispatcher through it, never through globals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todoctl.infrastructure.runtime import TodoRuntime


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TodoService(BaseService):
            def add(self, text: str) -> ServiceResult:
                added = self._runtime.dispatcher.execute(...)
    """

    def __init__(self, runtime: TodoRuntime) -> None:
        self._runtime = runtime
