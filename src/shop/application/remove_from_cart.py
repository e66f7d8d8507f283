"""Application service: Remove From Cart use case.

Dropping a cart entry gives its reserved units back to the product.
"""

from __future__ import annotations

from shop.domain.exceptions import CustomerNotFoundError
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.reservation_service import ReservationService


class RemoveFromCartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_email: str, product_name: str) -> int:
        """Release the reservation and return how many units went back to stock."""
        customer = self._customer_repo.get_by_email(customer_email)
        if customer is None:
            raise CustomerNotFoundError(customer_email)

        svc = ReservationService(self._product_repo, self._customer_repo)
        return svc.release(customer, product_name)
