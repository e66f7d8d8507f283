"""Domain service: Stock Reservation.

Reserving stock touches two aggregates at once — the Product loses
units and the Customer's cart records them — so the rule lives here
rather than on either aggregate.

Every method validates first and mutates second, so a raised error
never leaves a product and a cart out of step.  The service itself is
not thread-safe; callers serialize access (see InventoryStore).
"""

from __future__ import annotations

from shop.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from shop.domain.model.customer import Customer
from shop.domain.model.product import Product
from shop.domain.model.purchase import Purchase, PurchaseLine
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.product_repository import ProductRepository


class ReservationService:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        release_superseded: bool = True,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._release_superseded = release_superseded

    def reserve(self, customer: Customer, product: Product, quantity: Quantity) -> None:
        """Set the customer's reservation for *product* to *quantity*.

        The cart entry is overwritten, never accumulated.  With
        ``release_superseded`` the units held by the previous reservation
        go back to stock first, so a customer can lower or raise their
        quantity freely.  Without it the old units stay consumed.
        """
        previous = customer.reserved_quantity(product.name)
        released = previous if self._release_superseded else 0

        available = product.quantity + released
        if quantity.value > available:
            raise InsufficientStockError(product.name, quantity.value, available)

        if released:
            product.restock(released)
        product.take(quantity.value)
        customer.set_cart_item(product.name, quantity.value)

        self._product_repo.save(product)
        self._customer_repo.save(customer)

    def release(self, customer: Customer, product_name: str) -> int:
        """Cancel a reservation and return its units to stock.

        Returns the number of units released.
        """
        if product_name not in customer.cart:
            raise ValidationError(
                f"Product '{product_name}' is not in the cart of {customer.email}"
            )
        product = self._product_repo.get_by_name(product_name)
        if product is None:
            raise ProductNotFoundError(product_name)

        quantity = customer.remove_cart_item(product_name)
        product.restock(quantity)

        self._product_repo.save(product)
        self._customer_repo.save(customer)
        return quantity

    def finalize(self, customer: Customer) -> Purchase | None:
        """Turn the whole cart into a completed purchase.

        Stock was consumed when each item was reserved, so no stock check
        happens here.  Unit prices are snapshotted from the catalog.
        Returns None (and records nothing) for an empty cart.
        """
        if not customer.cart:
            return None

        # Phase 1: resolve prices for every line before touching the customer
        lines: list[PurchaseLine] = []
        for product_name, qty in customer.cart.items():
            product = self._product_repo.get_by_name(product_name)
            if product is None:
                raise ProductNotFoundError(product_name)
            lines.append(
                PurchaseLine(
                    product_name=product_name,
                    quantity=Quantity(qty),
                    unit_price=product.price,
                )
            )

        # Phase 2: record and clear
        purchase = Purchase(customer_email=customer.email, lines=tuple(lines))
        customer.record_purchase(purchase)
        self._customer_repo.save(customer)
        return purchase
