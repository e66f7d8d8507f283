"""Application service: List Customers use case (query)."""

from __future__ import annotations

from shop.application.dto import CustomerDTO, customer_to_dto
from shop.domain.repository.customer_repository import CustomerRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        return [customer_to_dto(c) for c in self._customer_repo.list_all()]
