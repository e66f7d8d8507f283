"""Application service: Add Product use case."""

from __future__ import annotations

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import DuplicateEntityError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str | int | float, quantity: int) -> ProductDTO:
        """Add a new product to the catalog with an initial stock level."""
        product = Product.create(name=name, price=Money.of(price), quantity=quantity)

        if self._product_repo.get_by_name(product.name) is not None:
            raise DuplicateEntityError(f"Product '{product.name}' already exists")

        self._product_repo.save(product)
        return product_to_dto(product)
