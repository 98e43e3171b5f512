"""Domain events raised by customers and products.

Every event is an immutable envelope: the moment it occurred plus a payload
whose shape depends on the kind of event. The dispatcher routes on
``event_type``, which defaults to the concrete class name.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.models import Address

PayloadT = TypeVar("PayloadT")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Event(BaseModel, Generic[PayloadT]):
    model_config = ConfigDict(frozen=True)

    occurred_at: datetime = Field(default_factory=_utcnow)
    payload: PayloadT

    @property
    def event_type(self) -> str:
        return type(self).__name__


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


class ProductCreated(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    price: float


class CustomerCreated(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str


class CustomerChangedAddress(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    address: Address


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class ProductCreatedEvent(Event[ProductCreated]):
    """Fired when a new product is persisted."""


class CustomerCreatedEvent(Event[CustomerCreated]):
    """Fired when a new customer is persisted."""


class CustomerChangedAddressEvent(Event[CustomerChangedAddress]):
    """Fired after a customer's address has been replaced."""

    @property
    def event_type(self) -> str:
        # Registry key predates the class name; existing subscribers use it.
        return "CustomerChandedAddressEvent"
