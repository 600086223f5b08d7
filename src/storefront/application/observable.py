"""Explicit change notification for the stores.

Consumers get a store object and subscribe to it; nothing is global.
Listeners are called with the store after a mutation is fully applied.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Listener = Callable[[Any], None]


class Observable:

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        # Copy so a listener may unsubscribe itself while being notified.
        for listener in list(self._listeners):
            listener(self)
