"""Entities and value objects of the storefront domain."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from storefront.domain.errors import DomainError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _require_text(value: str, message: str) -> str:
    if not value or not value.strip():
        raise DomainError(message)
    return value


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str
    number: int
    zip: str
    city: str

    @field_validator("street", "zip", "city")
    @classmethod
    def _not_blank(cls, value: str, info) -> str:
        return _require_text(value, f"{info.field_name} is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Customer(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    @field_validator("id")
    @classmethod
    def _id_required(cls, value: str) -> str:
        return _require_text(value, "Id is required")

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        return _require_text(value, "Name is required")

    def change_name(self, name: str) -> None:
        self.name = _require_text(name, "Name is required")

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        if self.address is None:
            raise DomainError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        if points < 0:
            raise DomainError("Reward points must be positive")
        self.reward_points += points


class Product(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    price: float

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        return _require_text(value, "Name is required")

    @field_validator("price")
    @classmethod
    def _price_not_negative(cls, value: float) -> float:
        if value < 0:
            raise DomainError("Price must be greater than or equal to zero")
        return value

    def change_name(self, name: str) -> None:
        self.name = _require_text(name, "Name is required")

    def change_price(self, price: float) -> None:
        if price < 0:
            raise DomainError("Price must be greater than or equal to zero")
        self.price = price


class OrderItem(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    price: float
    product_id: str
    quantity: int

    @field_validator("quantity")
    @classmethod
    def _quantity_positive(cls, value: int) -> int:
        if value <= 0:
            raise DomainError("Quantity must be greater than zero")
        return value

    @property
    def total(self) -> float:
        return self.price * self.quantity


class Order(BaseModel):
    id: str = Field(default_factory=_new_id)
    customer_id: str
    items: list[OrderItem]

    @field_validator("customer_id")
    @classmethod
    def _customer_required(cls, value: str) -> str:
        return _require_text(value, "CustomerId is required")

    @model_validator(mode="after")
    def _has_items(self) -> Order:
        if not self.items:
            raise DomainError("Items are required")
        return self

    def total(self) -> float:
        return sum(item.total for item in self.items)


class Notification(BaseModel):
    """A side effect recorded by an event handler."""

    id: str = Field(default_factory=_new_id)
    event_type: str
    channel: str
    recipient: str | None = None
    message: str
    created_at: datetime = Field(default_factory=_utcnow)
