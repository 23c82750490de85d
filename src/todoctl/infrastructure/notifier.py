"""Notifier: synchronous change fan-out to zero-argument callbacks.

INVARIANT: Subscriber failures are logged, never raised.  One broken
subscriber must not starve the ones registered after it, nor undo the
mutation that triggered the pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

Callback = Callable[[], object]


class Notifier:
    """An ordered set of callbacks invoked after every store mutation.

    Registration is idempotent and calls run in registration order.
    """

    def __init__(self) -> None:
        # dict as an insertion-ordered set
        self._callbacks: dict[Callback, None] = {}

    def register(self, callback: Callback) -> None:
        """Add *callback*. No-op if it is already registered."""
        if not callable(callback):
            msg = f"Subscriber must be callable, got {type(callback).__name__}"
            raise TypeError(msg)
        self._callbacks.setdefault(callback, None)

    def unregister(self, callback: Callback) -> None:
        """Remove *callback* if present."""
        self._callbacks.pop(callback, None)

    def notify_all(self) -> int:
        """Call every subscriber once. Returns the number that raised."""
        failures = 0
        # Snapshot: a callback may (un)register others mid-pass.
        for callback in list(self._callbacks):
            try:
                callback()
            except Exception:
                failures += 1
                logger.exception("Subscriber %s failed", _describe(callback))
        return failures

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, callback: object) -> bool:
        return callback in self._callbacks


def _describe(callback: Callback) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
