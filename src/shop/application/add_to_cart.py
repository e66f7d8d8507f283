"""Application service: Add To Cart use case.

Looks up both aggregates, then lets the reservation service move stock
from the product into the customer's cart.  Lookups happen in a fixed
order (customer, product, quantity, stock) so the error a caller sees
for a bad request is predictable.
"""

from __future__ import annotations

from shop.domain.exceptions import CustomerNotFoundError, ProductNotFoundError
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.reservation_service import ReservationService


class AddToCartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        release_superseded: bool = True,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._release_superseded = release_superseded

    def handle(self, customer_email: str, product_name: str, quantity: int) -> None:
        customer = self._customer_repo.get_by_email(customer_email)
        if customer is None:
            raise CustomerNotFoundError(customer_email)

        product = self._product_repo.get_by_name(product_name)
        if product is None:
            raise ProductNotFoundError(product_name)

        svc = ReservationService(
            self._product_repo,
            self._customer_repo,
            release_superseded=self._release_superseded,
        )
        svc.reserve(customer, product, Quantity(quantity))
