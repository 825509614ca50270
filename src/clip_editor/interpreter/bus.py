"""Minimal event bus for interpreter notifications."""

from __future__ import annotations

from typing import Callable, Dict

Listener = Callable[[object], None]


class EventBus:
    """Fan-out of named events to subscribed callbacks, in subscription order."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Listener]] = {}

    def subscribe(self, event: str, callback: Listener) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Listener) -> None:
        listeners = self._subscribers.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)
