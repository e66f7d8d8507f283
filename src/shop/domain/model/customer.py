"""Customer aggregate.

The customer owns its cart (product name -> reserved quantity) and the
history of completed purchases.  The cart only records what was reserved;
the matching stock has already been taken from the product.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import ValidationError
from shop.domain.model.purchase import Purchase


@dataclass
class Customer:

    name: str
    email: str
    cart: dict[str, int] = field(default_factory=dict)
    purchases: list[Purchase] = field(default_factory=list)

    @staticmethod
    def create(name: str, email: str) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid customer email: {email!r}")
        return Customer(name=name.strip(), email=email.strip())

    def reserved_quantity(self, product_name: str) -> int:
        """Units of *product_name* currently held in the cart (0 if none)."""
        return self.cart.get(product_name, 0)

    def set_cart_item(self, product_name: str, quantity: int) -> None:
        """Set (not add to) the desired quantity for a product."""
        if quantity <= 0:
            raise ValidationError("Cart quantity must be positive")
        self.cart[product_name] = quantity

    def remove_cart_item(self, product_name: str) -> int:
        """Drop a product from the cart and return the quantity it held."""
        if product_name not in self.cart:
            raise ValidationError(
                f"Product '{product_name}' is not in the cart of {self.email}"
            )
        return self.cart.pop(product_name)

    def record_purchase(self, purchase: Purchase) -> None:
        """Append a completed purchase and empty the cart."""
        self.purchases.append(purchase)
        self.cart.clear()
