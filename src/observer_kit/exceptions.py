"""Custom exceptions raised by observer_kit."""


class ObserverError(RuntimeError):
    """Base error for all listener registry related exceptions."""


class InvalidListenerError(ObserverError, TypeError):
    """Raised when something that is not callable is registered as a listener."""


class InvalidEventError(ObserverError, TypeError):
    """Raised when an event key or payload cannot be routed."""
