"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return a customer by email, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Store a new or updated customer."""
