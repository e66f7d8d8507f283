"""Data Transfer Objects — immutable snapshots that cross layer boundaries.

The store hands these out instead of the live aggregates, so a caller can
keep them around without ever observing (or causing) a later mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shop.domain.model.customer import Customer
from shop.domain.model.product import Product
from shop.domain.model.purchase import Purchase
from shop.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductDTO:

    name: str
    price: Money
    quantity: int


@dataclass(frozen=True)
class CustomerDTO:

    name: str
    email: str


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart entry: product name + reserved quantity."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class PurchaseLineDTO:

    product_name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class PurchaseDTO:

    customer_email: str
    lines: tuple[PurchaseLineDTO, ...]
    total: Money
    item_count: int
    created_at: datetime


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(name=product.name, price=product.price, quantity=product.quantity)


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(name=customer.name, email=customer.email)


def cart_to_dto(customer: Customer) -> list[CartLineDTO]:
    return [
        CartLineDTO(product_name=name, quantity=qty)
        for name, qty in customer.cart.items()
    ]


def purchase_to_dto(purchase: Purchase) -> PurchaseDTO:
    return PurchaseDTO(
        customer_email=purchase.customer_email,
        lines=tuple(
            PurchaseLineDTO(
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=line.unit_price,
                line_total=line.line_total,
            )
            for line in purchase.lines
        ),
        total=purchase.total,
        item_count=purchase.item_count,
        created_at=purchase.created_at,
    )
