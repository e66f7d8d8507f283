"""InventoryStore — the single, thread-safe entry point into the shop.

Owns the product and customer repositories and one re-entrant lock.
Every operation runs its whole read-check-write sequence inside the
lock, and queries return frozen DTO snapshots built inside it, so no
caller can observe stock taken without the cart updated (or the other
way round).

The handlers it delegates to are not thread-safe on their own.
"""

from __future__ import annotations

import threading

from shop.application.add_customer import AddCustomerHandler
from shop.application.add_product import AddProductHandler
from shop.application.add_to_cart import AddToCartHandler
from shop.application.checkout import CheckoutHandler
from shop.application.dto import CartLineDTO, CustomerDTO, ProductDTO, PurchaseDTO
from shop.application.purchase_history import PurchaseHistoryHandler
from shop.application.remove_from_cart import RemoveFromCartHandler
from shop.application.show_customers import ListCustomersHandler
from shop.application.show_products import ListProductsHandler, ShowProductHandler
from shop.application.view_cart import ViewCartHandler
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.product_repository import ProductRepository


class InventoryStore:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        release_superseded: bool = True,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._release_superseded = release_superseded
        self._lock = threading.RLock()

    # --- Catalog --------------------------------------------------------------

    def list_products(self) -> list[ProductDTO]:
        with self._lock:
            return ListProductsHandler(self._product_repo).handle()

    def get_product(self, name: str) -> ProductDTO:
        with self._lock:
            return ShowProductHandler(self._product_repo).handle(name)

    def add_product(self, name: str, price: str | int | float, quantity: int) -> ProductDTO:
        with self._lock:
            return AddProductHandler(self._product_repo).handle(name, price, quantity)

    def list_customers(self) -> list[CustomerDTO]:
        with self._lock:
            return ListCustomersHandler(self._customer_repo).handle()

    def add_customer(self, name: str, email: str) -> CustomerDTO:
        with self._lock:
            return AddCustomerHandler(self._customer_repo).handle(name, email)

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self, customer_email: str, product_name: str, quantity: int) -> None:
        """Reserve *quantity* units of a product for a customer.

        Overwrites any earlier reservation of the same product.  Raises
        CustomerNotFoundError, ProductNotFoundError, ValidationError
        (non-positive quantity) or InsufficientStockError; the store is
        unchanged whenever one is raised.
        """
        with self._lock:
            AddToCartHandler(
                self._product_repo,
                self._customer_repo,
                release_superseded=self._release_superseded,
            ).handle(customer_email, product_name, quantity)

    def remove_from_cart(self, customer_email: str, product_name: str) -> int:
        with self._lock:
            return RemoveFromCartHandler(
                self._product_repo, self._customer_repo
            ).handle(customer_email, product_name)

    def view_cart(self, customer_email: str) -> list[CartLineDTO]:
        with self._lock:
            return ViewCartHandler(self._customer_repo).handle(customer_email)

    # --- Checkout -------------------------------------------------------------

    def checkout(self, customer_email: str) -> PurchaseDTO | None:
        with self._lock:
            return CheckoutHandler(
                self._product_repo, self._customer_repo
            ).handle(customer_email)

    def purchase_history(self, customer_email: str) -> list[PurchaseDTO]:
        with self._lock:
            return PurchaseHistoryHandler(self._customer_repo).handle(customer_email)
