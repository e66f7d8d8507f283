"""Application service: Add Customer use case."""

from __future__ import annotations

from shop.application.dto import CustomerDTO, customer_to_dto
from shop.domain.exceptions import DuplicateEntityError
from shop.domain.model.customer import Customer
from shop.domain.repository.customer_repository import CustomerRepository


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, email: str) -> CustomerDTO:
        customer = Customer.create(name=name, email=email)

        if self._customer_repo.get_by_email(customer.email) is not None:
            raise DuplicateEntityError(f"Customer '{customer.email}' already exists")

        self._customer_repo.save(customer)
        return customer_to_dto(customer)
