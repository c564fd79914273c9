"""Capability contracts for objects that emit events."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Protocol, runtime_checkable


@runtime_checkable
class EventEmitter(Protocol):
    """Implemented by every class that emits keyed events.

    External code subscribes through these two methods without depending on
    how the host stores its listeners.
    """

    def add_event_listener(self, key: Hashable, listener: Callable[..., Any]) -> None:  # pragma: no cover - Protocol
        ...

    def remove_event_listener(self, key: Hashable, listener: Callable[..., Any]) -> None:  # pragma: no cover - Protocol
        ...


@runtime_checkable
class Observable(Protocol):
    """Implemented by every class that emits a single event."""

    def add_listener(self, listener: Callable[..., Any]) -> None:  # pragma: no cover - Protocol
        ...

    def remove_listener(self, listener: Callable[..., Any]) -> None:  # pragma: no cover - Protocol
        ...

    def once_listener(self, listener: Callable[..., Any]) -> Any:  # pragma: no cover - Protocol
        ...


__all__ = ["EventEmitter", "Observable"]
