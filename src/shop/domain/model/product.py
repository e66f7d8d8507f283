"""Product aggregate.

A product is keyed by its name and carries a flat unit price plus the
number of units still in stock.  Stock only moves through ``take`` and
``restock``, which the reservation service drives.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import InsufficientStockError, ValidationError
from shop.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``quantity`` is never negative
    - ``name`` is non-blank
    """

    name: str
    price: Money
    quantity: int = 0

    @staticmethod
    def create(name: str, price: Money, quantity: int) -> Product:
        """Create a new catalog entry, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError(
                f"Stock quantity cannot be negative, got {quantity}"
            )
        return Product(name=name.strip(), price=price, quantity=quantity)

    def take(self, quantity: int) -> None:
        """Remove *quantity* units from stock for a reservation."""
        if quantity <= 0:
            raise ValidationError("Reservation quantity must be positive")
        if quantity > self.quantity:
            raise InsufficientStockError(self.name, quantity, self.quantity)
        self.quantity -= quantity

    def restock(self, quantity: int) -> None:
        """Return *quantity* units to stock (a released reservation)."""
        if quantity <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.quantity += quantity
