"""Domain event handlers — wired up at application startup."""

from __future__ import annotations

import logging

from storefront.config import Settings
from storefront.domain.dispatcher import EventDispatcher, EventHandler
from storefront.domain.events import (
    CustomerChangedAddressEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)
from storefront.domain.models import Notification
from storefront.repos.memory import NotificationRepository

logger = logging.getLogger(__name__)


class SendEmailWhenProductIsCreatedHandler:
    def __init__(self, notifications: NotificationRepository, sender: str) -> None:
        self.notifications = notifications
        self.sender = sender

    def handle(self, event: ProductCreatedEvent) -> None:
        message = f"New product available: {event.payload.name} ({event.payload.price:.2f})"
        logger.info("Sending email from %s: %s", self.sender, message)
        self.notifications.add(
            Notification(
                event_type=event.event_type,
                channel="email",
                recipient=self.sender,
                message=message,
            )
        )


class _ConsoleLogHandler:
    text = ""

    def __init__(self, notifications: NotificationRepository) -> None:
        self.notifications = notifications

    def handle(self, event: CustomerCreatedEvent) -> None:
        logger.info(self.text)
        self.notifications.add(
            Notification(event_type=event.event_type, channel="console", message=self.text)
        )


class SendConsoleLog1Handler(_ConsoleLogHandler):
    text = "This is the first log of the CustomerCreated event"


class SendConsoleLog2Handler(_ConsoleLogHandler):
    text = "This is the second log of the CustomerCreated event"


class SendWhenCustomerAddressChangedHandler:
    def __init__(self, notifications: NotificationRepository) -> None:
        self.notifications = notifications

    def handle(self, event: CustomerChangedAddressEvent) -> None:
        payload = event.payload
        message = (
            f"Address of customer {payload.id}, {payload.name} "
            f"changed to: {payload.address}"
        )
        logger.info(message)
        self.notifications.add(
            Notification(event_type=event.event_type, channel="console", message=message)
        )


class HandlerRegistry:
    """Subscribes the storefront's handlers to a dispatcher."""

    def __init__(
        self,
        dispatcher: EventDispatcher,
        notification_repo: NotificationRepository,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or Settings()
        self.dispatcher = dispatcher
        self.subscriptions: list[tuple[str, EventHandler]] = [
            (
                "ProductCreatedEvent",
                SendEmailWhenProductIsCreatedHandler(
                    notification_repo, settings.notification_sender
                ),
            ),
            ("CustomerCreatedEvent", SendConsoleLog1Handler(notification_repo)),
            ("CustomerCreatedEvent", SendConsoleLog2Handler(notification_repo)),
            (
                "CustomerChandedAddressEvent",
                SendWhenCustomerAddressChangedHandler(notification_repo),
            ),
        ]
        self._register()

    def _register(self) -> None:
        for event_type, handler in self.subscriptions:
            self.dispatcher.register(event_type, handler)

    def unregister(self) -> None:
        for event_type, handler in self.subscriptions:
            self.dispatcher.unregister(event_type, handler)
