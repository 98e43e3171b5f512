"""Synchronous in-process dispatcher for domain events."""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar, runtime_checkable

from storefront.domain.errors import InvalidHandlerError, UnresolvableEventTypeError

logger = logging.getLogger(__name__)

E_contra = TypeVar("E_contra", contravariant=True)


@runtime_checkable
class EventHandler(Protocol[E_contra]):
    """Anything with a ``handle(event)`` method can subscribe to events."""

    def handle(self, event: E_contra) -> None: ...


class EventDispatcher:
    """Routes published events to the handlers registered for their type.

    Handlers are keyed by the event type identifier and called synchronously
    in registration order. A handler that raises stops the dispatch: the
    exception propagates out of :meth:`notify` and later handlers are skipped.

    The registry is not locked; callers sharing a dispatcher across threads
    must synchronize access themselves.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    @property
    def event_handlers(self) -> dict[str, list[EventHandler]]:
        """Snapshot of the registry; changing it leaves the dispatcher untouched."""
        return {event_type: list(handlers) for event_type, handlers in self._handlers.items()}

    def handlers_for(self, event_type: str) -> list[EventHandler] | None:
        handlers = self._handlers.get(event_type)
        return None if handlers is None else list(handlers)

    def register(self, event_type: str, handler: EventHandler) -> None:
        _check_event_type(event_type)
        if not callable(getattr(handler, "handle", None)):
            raise InvalidHandlerError(
                f"{type(handler).__name__} has no callable handle() method"
            )
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug("Registered %s for %s", type(handler).__name__, event_type)

    def unregister(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if not handlers:
            return
        # Identity, not equality: equal-looking handlers stay distinct.
        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                logger.debug("Unregistered %s from %s", type(handler).__name__, event_type)
                return

    def unregister_all(self) -> None:
        self._handlers.clear()
        logger.debug("Cleared all event handlers")

    def notify(self, event: Any) -> None:
        event_type = _check_event_type(getattr(event, "event_type", None))
        handlers = self._handlers.get(event_type)
        if not handlers:
            return

        logger.debug("Dispatching %s to %d handler(s)", event_type, len(handlers))
        for handler in list(handlers):
            try:
                handler.handle(event)
            except Exception:
                logger.warning(
                    "Handler %s failed on %s; remaining handlers skipped",
                    type(handler).__name__,
                    event_type,
                )
                raise


def _check_event_type(event_type: object) -> str:
    if not isinstance(event_type, str) or not event_type:
        raise UnresolvableEventTypeError(
            f"event type must be a non-empty string, got {event_type!r}"
        )
    return event_type
