"""Application service: Checkout use case.

Finalizes every reservation in the customer's cart into one Purchase.
Stock is not checked again: it was taken when each item was reserved,
so checkout is purely reserved -> purchased.
"""

from __future__ import annotations

from shop.application.dto import PurchaseDTO, purchase_to_dto
from shop.domain.exceptions import CustomerNotFoundError
from shop.domain.repository.customer_repository import CustomerRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.reservation_service import ReservationService


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_email: str) -> PurchaseDTO | None:
        """Check out the cart.

        Returns the recorded purchase, or None when the cart was empty
        (a no-op: nothing is added to the purchase history).
        """
        customer = self._customer_repo.get_by_email(customer_email)
        if customer is None:
            raise CustomerNotFoundError(customer_email)

        svc = ReservationService(self._product_repo, self._customer_repo)
        purchase = svc.finalize(customer)
        if purchase is None:
            return None
        return purchase_to_dto(purchase)
