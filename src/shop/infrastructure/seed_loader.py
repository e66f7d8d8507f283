"""Seed loader — fills the in-memory repositories from a JSON document.

Expected shape::

    {
      "products":  [{"name": "Widget", "price": "9.99", "quantity": 10}],
      "customers": [{"name": "Alice", "email": "alice@example.com"}]
    }

The file is only read, never written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from shop.domain.exceptions import DuplicateEntityError, ValidationError
from shop.domain.model.customer import Customer
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.infrastructure.persistence.memory_customer_repository import (
    InMemoryCustomerRepository,
)
from shop.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)

LOGGER = logging.getLogger(__name__)


def load_seed(
    path: Path,
) -> tuple[InMemoryProductRepository, InMemoryCustomerRepository]:
    """Build repositories from *path*; a missing file gives empty ones."""
    if not path.exists():
        LOGGER.warning("Seed file not found, starting empty: %s", path)
        return InMemoryProductRepository(), InMemoryCustomerRepository()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Seed file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValidationError(f"Seed file {path} must contain a JSON object")

    products = _parse_products(_section(raw, "products", path))
    customers = _parse_customers(_section(raw, "customers", path))
    LOGGER.info(
        "Loaded %d products and %d customers from %s",
        len(products), len(customers), path,
    )
    return InMemoryProductRepository(products), InMemoryCustomerRepository(customers)


def _section(raw: dict, key: str, path: Path) -> list:
    section = raw.get(key, [])
    if not isinstance(section, list):
        raise ValidationError(f"Seed file {path}: '{key}' must be a list")
    return section


def _parse_products(items: list) -> list[Product]:
    products: list[Product] = []
    seen: set[str] = set()
    for item in items:
        try:
            product = Product.create(
                name=item["name"],
                price=Money.of(item["price"]),
                quantity=item.get("quantity", 0),
            )
        except (AttributeError, KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed product entry: {item!r}") from exc
        if product.name in seen:
            raise DuplicateEntityError(f"Product '{product.name}' already exists")
        seen.add(product.name)
        products.append(product)
    return products


def _parse_customers(items: list) -> list[Customer]:
    customers: list[Customer] = []
    seen: set[str] = set()
    for item in items:
        try:
            customer = Customer.create(name=item["name"], email=item["email"])
        except (AttributeError, KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed customer entry: {item!r}") from exc
        if customer.email in seen:
            raise DuplicateEntityError(f"Customer '{customer.email}' already exists")
        seen.add(customer.email)
        customers.append(customer)
    return customers
