"""Application service: View Cart use case (query)."""

from __future__ import annotations

from shop.application.dto import CartLineDTO, cart_to_dto
from shop.domain.exceptions import CustomerNotFoundError
from shop.domain.repository.customer_repository import CustomerRepository


class ViewCartHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_email: str) -> list[CartLineDTO]:
        """Return the cart lines in the order products were first added."""
        customer = self._customer_repo.get_by_email(customer_email)
        if customer is None:
            raise CustomerNotFoundError(customer_email)
        return cart_to_dto(customer)
