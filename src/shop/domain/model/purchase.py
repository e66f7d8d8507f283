"""Purchase record — what a checkout leaves behind on the customer.

A Purchase is immutable: once a cart has been checked out, the lines and
the prices they were bought at never change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class PurchaseLine:

    product_name: str
    quantity: Quantity
    unit_price: Money  # snapshot taken at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Purchase:

    customer_email: str
    lines: tuple[PurchaseLine, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
