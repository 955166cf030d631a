"""Multicast change notifications.

Collaborators (race manager, scene manager, tab container, channel grid,
remote-control client) each expose one `EventHook` per notification. Handlers
are invoked synchronously, in registration order, on the emitting thread.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, ParamSpec

P = ParamSpec("P")


class EventHook(Generic[P]):
    """A list of handlers that can be subscribed, unsubscribed and emitted to."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: list[Callable[P, object]] = []

    def subscribe(self, handler: Callable[P, object]) -> None:
        with self._lock:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[P, object]) -> None:
        """Remove one registration of `handler`; unknown handlers are ignored."""

        with self._lock:
            try:
                self._handlers.remove(handler)
            except ValueError:
                pass

    def emit(self, *args: P.args, **kwargs: P.kwargs) -> None:
        # Snapshot so handlers may unsubscribe while being called.
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            handler(*args, **kwargs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)
