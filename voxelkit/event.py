"""A simple publish/subscribe event."""

from __future__ import annotations

from typing import Any, Callable, List

Subscriber = Callable[[Any], None]


class Event:
    """Calls every subscriber with the data given to :meth:`trigger`."""

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    def trigger(self, data: Any = None) -> None:
        """Pass ``data`` to every subscriber."""
        for callback in list(self._subscribers):
            callback(data)

    def subscribe(self, callback: Subscriber) -> Subscriber:
        """Register ``callback``; returns it so this works as a decorator."""
        self._subscribers.append(callback)
        return callback

    def __len__(self) -> int:
        return len(self._subscribers)