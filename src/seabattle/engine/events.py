"""Synchronous in-process event emitter shared by engine objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Listener = Callable[..., None]


class EventEmitter:
    """Named pub/sub: every listener runs before :meth:`fire` returns."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event_name: str, listener: Listener) -> Listener:
        """Register a listener and return it so it can be passed to :meth:`off`."""
        self._listeners.setdefault(event_name, []).append(listener)
        return listener

    def off(self, event_name: str, listener: Listener) -> None:
        """Remove a listener if present."""
        listeners = self._listeners.get(event_name)
        if not listeners or listener not in listeners:
            return
        listeners.remove(listener)
        if not listeners:
            del self._listeners[event_name]

    def fire(self, event_name: str, *args: Any) -> int:
        """Call every listener of ``event_name`` and return how many ran."""
        invoked = 0
        for listener in tuple(self._listeners.get(event_name, ())):
            listener(*args)
            invoked += 1
        return invoked

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))
