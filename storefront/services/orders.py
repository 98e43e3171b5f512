"""Service for placing orders and totalling them."""

from __future__ import annotations

from storefront.domain.errors import DomainError
from storefront.domain.models import Customer, Order, OrderItem


def place_order(customer: Customer, items: list[OrderItem]) -> Order:
    """Build an order for *customer* and award reward points.

    The customer earns half the order total, rounded down, in points.
    """
    if not items:
        raise DomainError("Order must have at least one item")
    order = Order(customer_id=customer.id, items=items)
    customer.add_reward_points(int(order.total() // 2))
    return order


def orders_total(orders: list[Order]) -> float:
    return sum(order.total() for order in orders)
