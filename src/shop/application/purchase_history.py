"""Application service: Purchase History use case (query)."""

from __future__ import annotations

from shop.application.dto import PurchaseDTO, purchase_to_dto
from shop.domain.exceptions import CustomerNotFoundError
from shop.domain.repository.customer_repository import CustomerRepository


class PurchaseHistoryHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_email: str) -> list[PurchaseDTO]:
        customer = self._customer_repo.get_by_email(customer_email)
        if customer is None:
            raise CustomerNotFoundError(customer_email)
        return [purchase_to_dto(p) for p in customer.purchases]
