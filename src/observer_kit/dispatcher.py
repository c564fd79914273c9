"""Keyed listener registries.

:class:`EventDispatcher` groups one :class:`~observer_kit.observer.Observer`
per event key. Keys are plain hashable labels, usually strings::

    players = EventDispatcher()
    players.add_event_listener("AfterJoin", lambda player_id: ...)
    players.add_event_listener("AfterLeave", lambda player_id, reason: ...)
    players.notify("AfterJoin", 12)
    players.notify("AfterLeave", 12, "timeout")

:class:`TypedEventDispatcher` keys registries by :class:`~observer_kit.event.Event`
subclasses and recovers the key from the dispatched payload itself::

    class Joined(Event): ...

    events = TypedEventDispatcher()
    events.add_event_listener(Joined, lambda event: ...)
    events.dispatch(Joined())
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Hashable, Type, TypeVar

from .event import Event
from .exceptions import InvalidEventError
from .logging import get_logger
from .observer import Observer

LOGGER = get_logger("dispatcher")

K = TypeVar("K", bound=Hashable)
E = TypeVar("E", bound=Event)

Listener = Callable[..., Any]


class EventDispatcher(Generic[K]):
    """Routes listener operations to a lazily created registry per key."""

    def __init__(self) -> None:
        self._observers: Dict[K, Observer] = {}

    def add_event_listener(self, key: K, listener: Listener) -> None:
        self._ensure_observer(key).add(listener)

    def remove_event_listener(self, key: K, listener: Listener) -> None:
        observer = self._observers.get(key)
        if observer is not None:
            observer.remove(listener)

    def add_once_event_listener(self, key: K, listener: Listener) -> Listener:
        """Register ``listener`` for the next notification of ``key`` only.

        Returns the adapter actually stored; pass it to
        :meth:`remove_event_listener` to cancel before it fires.
        """

        return self._ensure_observer(key).add_once(listener)

    def notify(self, key: K, *args, **kwargs) -> None:
        """Deliver ``args`` to the listeners of ``key``; unknown keys are a no-op."""

        observer = self._observers.get(key)
        if observer is not None:
            observer.deliver(*args, **kwargs)

    def listener_count(self, key: K) -> int:
        observer = self._observers.get(key)
        return len(observer) if observer is not None else 0

    def has_listeners(self, key: K) -> bool:
        return self.listener_count(key) > 0

    def _ensure_observer(self, key: K) -> Observer:
        observer = self._observers.get(key)
        if observer is None:
            LOGGER.debug("Creating registry", extra={"key": _describe_key(key)})
            observer = self._observers[key] = Observer()
        return observer

    once_event_listener = add_once_event_listener
    dispatch = notify


class TypedEventDispatcher(EventDispatcher[Type[Event]]):
    """Dispatcher keyed by event class; listeners take the event instance."""

    def add_event_listener(self, key: Type[E], listener: Callable[[E], Any]) -> None:
        _check_event_type(key)
        super().add_event_listener(key, listener)

    def add_once_event_listener(self, key: Type[E], listener: Callable[[E], Any]) -> Listener:
        _check_event_type(key)
        return super().add_once_event_listener(key, listener)

    def dispatch(self, event: Event) -> None:
        """Deliver ``event`` to the listeners registered for its exact class."""

        if not isinstance(event, Event):
            raise InvalidEventError(f"Expected an Event instance, got {type(event).__name__}")
        super().notify(event.event_type, event)

    once_event_listener = add_once_event_listener
    notify = dispatch


def _check_event_type(key: object) -> None:
    if not (isinstance(key, type) and issubclass(key, Event)):
        raise InvalidEventError(f"Event key must be an Event subclass, got {key!r}")


def _describe_key(key: object) -> str:
    return key.__name__ if isinstance(key, type) else str(key)


__all__ = ["EventDispatcher", "TypedEventDispatcher"]
