"""Dict-backed implementation of CustomerRepository, keyed by email."""

from __future__ import annotations

from shop.domain.model.customer import Customer
from shop.domain.repository.customer_repository import CustomerRepository


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        for c in customers or []:
            self._store[c.email] = c

    def get_by_email(self, email: str) -> Customer | None:
        return self._store.get(email)

    def list_all(self) -> list[Customer]:
        return list(self._store.values())

    def save(self, customer: Customer) -> None:
        self._store[customer.email] = customer
