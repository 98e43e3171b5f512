"""FastAPI application — composition root for the storefront service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from storefront.config import Settings
from storefront.domain.dispatcher import EventDispatcher
from storefront.domain.errors import ConflictError, NotFoundError
from storefront.domain.handlers import HandlerRegistry
from storefront.domain.models import Address, Customer, Notification, Order, OrderItem, Product
from storefront.logging_config import configure_logging
from storefront.repos.memory import (
    CustomerRepository,
    NotificationRepository,
    OrderRepository,
    ProductRepository,
)
from storefront.services.customers import change_customer_address, create_customer
from storefront.services.orders import place_order
from storefront.services.products import create_product


class Container:
    """Everything the routes need, built once per application."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.dispatcher = EventDispatcher()
        self.customer_repo = CustomerRepository()
        self.product_repo = ProductRepository()
        self.order_repo = OrderRepository()
        self.notification_repo = NotificationRepository()
        self.handler_registry = HandlerRegistry(
            dispatcher=self.dispatcher,
            notification_repo=self.notification_repo,
            settings=settings,
        )


def get_container(request: Request) -> Container:
    return request.app.state.container


# ── Request bodies ────────────────────────────────────────────────────


class CreateCustomerRequest(BaseModel):
    name: str
    id: str | None = None


class CreateProductRequest(BaseModel):
    name: str
    price: float
    description: str = ""


class OrderLine(BaseModel):
    product_id: str
    quantity: int


class PlaceOrderRequest(BaseModel):
    customer_id: str
    items: list[OrderLine] = Field(min_length=1)


# ── Routes ────────────────────────────────────────────────────────────

router = APIRouter()


@router.post("/customers", response_model=Customer, status_code=201)
def post_customer(
    body: CreateCustomerRequest, c: Container = Depends(get_container)
) -> Customer:
    """Create a customer; subscribers of CustomerCreatedEvent run before the response."""
    try:
        return create_customer(body.name, c.customer_repo, c.dispatcher, customer_id=body.id)
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.get("/customers", response_model=list[Customer])
def list_customers(c: Container = Depends(get_container)) -> list[Customer]:
    return c.customer_repo.find_all()


@router.get("/customers/{customer_id}", response_model=Customer)
def get_customer(customer_id: str, c: Container = Depends(get_container)) -> Customer:
    try:
        return c.customer_repo.find(customer_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.put("/customers/{customer_id}/address", response_model=Customer)
def put_customer_address(
    customer_id: str, address: Address, c: Container = Depends(get_container)
) -> Customer:
    try:
        return change_customer_address(customer_id, address, c.customer_repo, c.dispatcher)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.post("/products", response_model=Product, status_code=201)
def post_product(
    body: CreateProductRequest, c: Container = Depends(get_container)
) -> Product:
    try:
        return create_product(
            body.name, body.price, c.product_repo, c.dispatcher, description=body.description
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.get("/products", response_model=list[Product])
def list_products(c: Container = Depends(get_container)) -> list[Product]:
    return c.product_repo.find_all()


@router.get("/products/{product_id}", response_model=Product)
def get_product(product_id: str, c: Container = Depends(get_container)) -> Product:
    try:
        return c.product_repo.find(product_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.post("/orders", response_model=Order, status_code=201)
def post_order(body: PlaceOrderRequest, c: Container = Depends(get_container)) -> Order:
    """Place an order for an existing customer and award reward points."""
    try:
        customer = c.customer_repo.find(body.customer_id)
        items = []
        for line in body.items:
            product = c.product_repo.find(line.product_id)
            items.append(
                OrderItem(
                    name=product.name,
                    price=product.price,
                    product_id=product.id,
                    quantity=line.quantity,
                )
            )
        order = place_order(customer, items)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    c.order_repo.create(order)
    c.customer_repo.update(customer)
    return order


@router.get("/orders/{order_id}", response_model=Order)
def get_order(order_id: str, c: Container = Depends(get_container)) -> Order:
    try:
        return c.order_repo.find(order_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.get("/notifications", response_model=list[Notification])
def list_notifications(c: Container = Depends(get_container)) -> list[Notification]:
    return c.notification_repo.list_all()


@router.get("/subscriptions")
def list_subscriptions(c: Container = Depends(get_container)) -> dict[str, list[str]]:
    """Event type → names of the handlers subscribed to it, in dispatch order."""
    return {
        event_type: [type(handler).__name__ for handler in handlers]
        for event_type, handlers in c.dispatcher.event_handlers.items()
    }


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Storefront Service")
    app.state.container = Container(settings)
    app.include_router(router)
    return app


app = create_app()
