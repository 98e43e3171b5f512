"""Service for creating customers and moving them to a new address."""

from __future__ import annotations

from storefront.domain.dispatcher import EventDispatcher
from storefront.domain.events import (
    CustomerChangedAddress,
    CustomerChangedAddressEvent,
    CustomerCreated,
    CustomerCreatedEvent,
)
from storefront.domain.models import Address, Customer
from storefront.repos.memory import CustomerRepository


def create_customer(
    name: str,
    repo: CustomerRepository,
    dispatcher: EventDispatcher,
    customer_id: str | None = None,
) -> Customer:
    """Persist a new customer and publish CustomerCreatedEvent."""
    customer = Customer(name=name) if customer_id is None else Customer(id=customer_id, name=name)
    repo.create(customer)
    dispatcher.notify(
        CustomerCreatedEvent(payload=CustomerCreated(id=customer.id, name=customer.name))
    )
    return customer


def change_customer_address(
    customer_id: str,
    address: Address,
    repo: CustomerRepository,
    dispatcher: EventDispatcher,
) -> Customer:
    """Replace a stored customer's address and publish CustomerChangedAddressEvent.

    Raises NotFoundError if the customer does not exist.
    """
    customer = repo.find(customer_id)
    customer.change_address(address)
    repo.update(customer)
    dispatcher.notify(
        CustomerChangedAddressEvent(
            payload=CustomerChangedAddress(
                id=customer.id, name=customer.name, address=address
            )
        )
    )
    return customer
