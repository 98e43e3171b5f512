"""In-memory repositories for customers, products, orders and notifications."""

from __future__ import annotations

from storefront.domain.errors import ConflictError, NotFoundError
from storefront.domain.models import Customer, Notification, Order, Product


class CustomerRepository:
    """Dict-backed store for Customer instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Customer] = {}

    def create(self, customer: Customer) -> None:
        if customer.id in self._store:
            raise ConflictError("Customer already exists")
        self._store[customer.id] = customer

    def update(self, customer: Customer) -> None:
        if customer.id not in self._store:
            raise NotFoundError("Customer not found")
        self._store[customer.id] = customer

    def find(self, customer_id: str) -> Customer:
        try:
            return self._store[customer_id]
        except KeyError:
            raise NotFoundError("Customer not found") from None

    def find_all(self) -> list[Customer]:
        return list(self._store.values())


class ProductRepository:
    """Dict-backed store for Product instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Product] = {}

    def create(self, product: Product) -> None:
        if product.id in self._store:
            raise ConflictError("Product already exists")
        self._store[product.id] = product

    def update(self, product: Product) -> None:
        if product.id not in self._store:
            raise NotFoundError("Product not found")
        self._store[product.id] = product

    def find(self, product_id: str) -> Product:
        try:
            return self._store[product_id]
        except KeyError:
            raise NotFoundError("Product not found") from None

    def find_all(self) -> list[Product]:
        return list(self._store.values())


class OrderRepository:
    """Dict-backed store for Order instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def create(self, order: Order) -> None:
        if order.id in self._store:
            raise ConflictError("Order already exists")
        self._store[order.id] = order

    def update(self, order: Order) -> None:
        if order.id not in self._store:
            raise NotFoundError("Order not found")
        self._store[order.id] = order

    def find(self, order_id: str) -> Order:
        try:
            return self._store[order_id]
        except KeyError:
            raise NotFoundError("Order not found") from None

    def find_all(self) -> list[Order]:
        return list(self._store.values())


class NotificationRepository:
    """List-backed store for Notification instances."""

    def __init__(self) -> None:
        self._entries: list[Notification] = []

    def add(self, notification: Notification) -> None:
        self._entries.append(notification)

    def list_all(self) -> list[Notification]:
        return list(self._entries)

    def list_for_event_type(self, event_type: str) -> list[Notification]:
        return [n for n in self._entries if n.event_type == event_type]
