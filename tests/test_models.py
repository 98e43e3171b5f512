"""Tests for entity and value-object invariants."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from storefront.domain.errors import DomainError
from storefront.domain.models import Address, Customer, Order, OrderItem, Product


def _address() -> Address:
    return Address(street="Street 1", number=1, zip="Zipcode 1", city="City 1")


def _item(**overrides) -> OrderItem:
    defaults = dict(id="i1", name="Item 1", price=100, product_id="p1", quantity=2)
    defaults.update(overrides)
    return OrderItem(**defaults)


# ---------------------------------------------------------------------------
# Customer
# ---------------------------------------------------------------------------


def test_customer_requires_id_and_name():
    with pytest.raises(ValidationError, match="Id is required"):
        Customer(id="", name="John")
    with pytest.raises(ValidationError, match="Name is required"):
        Customer(id="123", name="")


def test_customer_change_name():
    customer = Customer(id="123", name="John")
    customer.change_name("Jane")
    assert customer.name == "Jane"

    with pytest.raises(DomainError, match="Name is required"):
        customer.change_name(" ")


def test_activate_requires_address():
    customer = Customer(id="1", name="Customer 1")
    with pytest.raises(DomainError, match="Address is mandatory"):
        customer.activate()

    customer.change_address(_address())
    customer.activate()
    assert customer.active is True

    customer.deactivate()
    assert customer.active is False


def test_reward_points_accumulate():
    customer = Customer(id="1", name="Customer 1")
    assert customer.reward_points == 0

    customer.add_reward_points(10)
    customer.add_reward_points(10)
    assert customer.reward_points == 20


def test_address_is_frozen_and_validated():
    address = _address()
    with pytest.raises(ValidationError):
        address.city = "Elsewhere"
    with pytest.raises(ValidationError, match="street is required"):
        Address(street="", number=1, zip="z", city="c")


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------


def test_product_validation():
    with pytest.raises(ValidationError, match="Name is required"):
        Product(id="123", name="", price=100)
    with pytest.raises(ValidationError, match="greater than or equal to zero"):
        Product(id="123", name="Name", price=-1)


def test_product_change_name_and_price():
    product = Product(id="123", name="Product 1", price=100)
    product.change_name("Product 2")
    product.change_price(150)
    assert (product.name, product.price) == ("Product 2", 150)

    with pytest.raises(DomainError):
        product.change_price(-1)


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------


def test_order_total():
    order = Order(id="o1", customer_id="c1", items=[_item(), _item(id="i2", price=200, quantity=2)])
    assert order.total() == 600


def test_order_requires_customer_and_items():
    with pytest.raises(ValidationError, match="CustomerId is required"):
        Order(id="o1", customer_id="", items=[_item()])
    with pytest.raises(ValidationError, match="Items are required"):
        Order(id="o1", customer_id="c1", items=[])


def test_item_quantity_must_be_positive():
    with pytest.raises(ValidationError, match="Quantity must be greater than zero"):
        _item(quantity=0)
