"""Observable single-value container."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import TypeAdapter

from .dispatcher import EventDispatcher
from .exceptions import InvalidEventError
from .logging import describe_listener, get_logger, log_event

LOGGER = get_logger("value")

T = TypeVar("T")

Validator = Callable[[Optional[T]], None]


class Value(Generic[T]):
    """Holds one value and reports every change.

    Assigning to :attr:`value` runs the validator first. A rejected value is
    reported to ``"Error"`` listeners as ``(error, value)`` and is not
    stored; an accepted one is stored and reported to ``"Change"`` listeners.
    Assigning a value equal to the current one does nothing.
    """

    CHANGE = "Change"
    ERROR = "Error"

    def __init__(self, value: Optional[T] = None, validate: Validator | None = None) -> None:
        self._value = value
        self._validate = validate
        self._dispatcher: EventDispatcher[str] = EventDispatcher()

    @property
    def value(self) -> Optional[T]:
        return self._value

    @value.setter
    def value(self, value: Optional[T]) -> None:
        if self._value == value:
            return
        if self._validate is not None:
            try:
                self._validate(value)
            except Exception as exc:
                log_event(
                    LOGGER,
                    "value_rejected",
                    {"value": repr(value), "error": str(exc)},
                    level=logging.DEBUG,
                )
                self._dispatcher.notify(self.ERROR, exc, value)
                return
        self._value = value
        self._dispatcher.notify(self.CHANGE, value)

    def add_event_listener(self, key: str, listener: Callable[..., Any]) -> None:
        self._dispatcher.add_event_listener(self._check_key(key), listener)

    def remove_event_listener(self, key: str, listener: Callable[..., Any]) -> None:
        self._dispatcher.remove_event_listener(self._check_key(key), listener)

    def once_event_listener(self, key: str, listener: Callable[..., Any]) -> Callable[..., Any]:
        return self._dispatcher.add_once_event_listener(self._check_key(key), listener)

    def _check_key(self, key: str) -> str:
        if key not in (self.CHANGE, self.ERROR):
            raise InvalidEventError(f"Value emits only {self.CHANGE!r} and {self.ERROR!r}, got {key!r}")
        return key

    def __repr__(self) -> str:
        validator = describe_listener(self._validate) if self._validate else None
        return f"Value({self._value!r}, validate={validator})"


def type_validator(annotation: Any) -> Validator:
    """Build a validator that accepts only values matching ``annotation``.

    Validation is strict, so ``type_validator(int)`` rejects ``"5"``. The
    pydantic ``ValidationError`` is what reaches ``"Error"`` listeners.
    """

    adapter = TypeAdapter(annotation)

    def validate(value: Any) -> None:
        adapter.validate_python(value, strict=True)

    return validate


__all__ = ["Value", "type_validator"]
