"""Dict-backed implementation of ProductRepository.

The catalog lives entirely in memory, keyed by product name.  Nothing is
written anywhere; state is gone when the process exits.
"""

from __future__ import annotations

from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.name] = p

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.name] = product
