"""Single-signal listener registry."""

from __future__ import annotations

import logging
from functools import wraps
from types import BuiltinMethodType, MethodType
from typing import Callable, Generic, List, Tuple, TypeVar

from .exceptions import InvalidListenerError
from .logging import describe_listener, get_logger

LOGGER = get_logger("observer")

L = TypeVar("L", bound=Callable[..., None])


class Observer(Generic[L]):
    """Ordered, duplicate-free collection of listeners for one signal.

    Listeners are matched by identity, so two equal-looking lambdas are two
    different listeners. Basic usage::

        products = Observer()
        products.add(lambda product_id, name: ...)
        products.deliver(12, "Title")
    """

    def __init__(self) -> None:
        self._listeners: List[L] = []

    def add(self, listener: L) -> None:
        """Append ``listener`` unless the very same callable is already registered."""

        _check_callable(listener)
        if self._index(listener) >= 0:
            _debug("Ignoring duplicate listener", listener)
            return
        self._listeners.append(listener)

    def remove(self, listener: L) -> None:
        """Remove ``listener`` if present; absent listeners are ignored."""

        index = self._index(listener)
        if index < 0:
            _debug("Listener not registered", listener)
            return
        del self._listeners[index]

    def add_once(self, listener: L) -> L:
        """Register ``listener`` for a single delivery.

        The listener is wrapped in an adapter that unregisters itself after
        the call returns. The adapter is what gets stored and returned, so
        ``remove(adapter)`` cancels a pending once-listener while
        ``remove(listener)`` has no effect.
        """

        _check_callable(listener)

        @wraps(listener)
        def once(*args, **kwargs) -> None:
            listener(*args, **kwargs)
            self.remove(once)

        self.add(once)
        return once

    def deliver(self, *args, **kwargs) -> None:
        """Call every registered listener in registration order.

        The listener list is copied before iterating: listeners added during
        the pass wait for the next one, listeners removed during the pass are
        still called. An exception raised by a listener stops the pass and
        propagates to the caller.
        """

        for listener in tuple(self._listeners):
            try:
                listener(*args, **kwargs)
            except Exception:
                _debug("Listener raised during delivery", listener, exc_info=True)
                raise

    def listeners(self) -> Tuple[L, ...]:
        return tuple(self._listeners)

    def _index(self, listener: object) -> int:
        for index, registered in enumerate(self._listeners):
            if _same_listener(registered, listener):
                return index
        return -1

    def __contains__(self, listener: object) -> bool:
        return self._index(listener) >= 0

    def __len__(self) -> int:
        return len(self._listeners)

    # Observable protocol spelling
    add_listener = add
    remove_listener = remove
    once_listener = add_once
    notify = deliver


def _check_callable(listener: object) -> None:
    if not callable(listener):
        raise InvalidListenerError(f"Listener must be callable, got {type(listener).__name__}")


def _debug(message: str, listener: object, exc_info: bool = False) -> None:
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug(message, extra={"listener": describe_listener(listener)}, exc_info=exc_info)


def _same_listener(registered: object, listener: object) -> bool:
    # Bound methods are rebuilt on every attribute access.
    if registered is listener:
        return True
    if isinstance(listener, (MethodType, BuiltinMethodType)):
        return registered == listener
    return False


__all__ = ["Observer"]
