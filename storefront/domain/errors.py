"""Exceptions raised by the domain layer and the event dispatcher."""

from __future__ import annotations


class DomainError(ValueError):
    """An entity or service invariant was violated."""


class NotFoundError(DomainError):
    """A repository lookup found nothing for the given id."""


class DispatchError(TypeError):
    """The event dispatcher was used incorrectly."""


class UnresolvableEventTypeError(DispatchError):
    """An event type identifier was missing, empty or not a string."""


class InvalidHandlerError(DispatchError):
    """A registered handler does not expose a callable ``handle``."""


class ConflictError(DomainError):
    """A repository already holds an entity with the given id."""
