"""Base class for type-tagged event payloads."""

from __future__ import annotations


class Event:
    """Payload base class routed by :class:`~observer_kit.dispatcher.TypedEventDispatcher`.

    Subclasses carry whatever data their listeners need. The concrete class
    of an instance is its routing key.
    """

    __slots__ = ()

    @property
    def event_type(self) -> type["Event"]:
        return type(self)
