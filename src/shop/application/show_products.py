"""Application service: catalog queries (list all / show one)."""

from __future__ import annotations

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import ProductNotFoundError
from shop.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_all()]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str) -> ProductDTO:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise ProductNotFoundError(name)
        return product_to_dto(product)
