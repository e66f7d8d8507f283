"""Unit tests for the Product aggregate."""

import pytest

from shop.domain.exceptions import InsufficientStockError, ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


def _widget(quantity: int = 10) -> Product:
    return Product(name="Widget", price=Money.of("9.99"), quantity=quantity)


class TestProductCreate:

    def test_create_strips_name(self):
        p = Product.create("  Widget ", Money.of("9.99"), 10)
        assert p.name == "Widget"
        assert p.quantity == 10

    def test_zero_stock_allowed(self):
        assert Product.create("Widget", Money.of("1"), 0).quantity == 0

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("   ", Money.of("1"), 1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("Widget", Money.of("1"), -1)

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product.create("Widget", Money.of("1"), "10")


class TestProductTake:

    def test_take_reduces_stock(self):
        p = _widget()
        p.take(4)
        assert p.quantity == 6

    def test_take_everything(self):
        p = _widget()
        p.take(10)
        assert p.quantity == 0

    def test_take_more_than_stock_rejected(self):
        p = _widget()
        with pytest.raises(InsufficientStockError, match="Insufficient stock for Widget") as info:
            p.take(11)
        assert info.value.requested == 11
        assert info.value.available == 10
        assert p.quantity == 10

    def test_take_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _widget().take(0)


class TestProductRestock:

    def test_restock_increases_stock(self):
        p = _widget(quantity=2)
        p.restock(3)
        assert p.quantity == 5

    def test_restock_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _widget().restock(-1)
