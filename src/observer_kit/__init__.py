"""Listener registries, keyed dispatchers and observable values."""

from .dispatcher import EventDispatcher, TypedEventDispatcher
from .emitter import EventEmitter, Observable
from .event import Event
from .exceptions import InvalidEventError, InvalidListenerError, ObserverError
from .observer import Observer
from .value import Value, type_validator

__all__ = [
    "Event",
    "EventDispatcher",
    "EventEmitter",
    "InvalidEventError",
    "InvalidListenerError",
    "Observable",
    "Observer",
    "ObserverError",
    "TypedEventDispatcher",
    "Value",
    "type_validator",
]
