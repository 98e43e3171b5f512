"""Service for creating products and adjusting their prices."""

from __future__ import annotations

from storefront.domain.dispatcher import EventDispatcher
from storefront.domain.events import ProductCreated, ProductCreatedEvent
from storefront.domain.models import Product
from storefront.repos.memory import ProductRepository


def create_product(
    name: str,
    price: float,
    repo: ProductRepository,
    dispatcher: EventDispatcher,
    description: str = "",
) -> Product:
    """Persist a new product and publish ProductCreatedEvent."""
    product = Product(name=name, price=price)
    repo.create(product)
    dispatcher.notify(
        ProductCreatedEvent(
            payload=ProductCreated(name=product.name, description=description, price=product.price)
        )
    )
    return product


def increase_prices(products: list[Product], percentage: float) -> list[Product]:
    """Raise every product's price by *percentage* percent, in place."""
    for product in products:
        product.change_price(product.price * (1 + percentage / 100))
    return products
