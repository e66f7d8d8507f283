"""Integration tests for the Checkout, ViewCart and PurchaseHistory use cases."""

import pytest

from shop.application.add_to_cart import AddToCartHandler
from shop.application.checkout import CheckoutHandler
from shop.application.dto import CartLineDTO
from shop.application.purchase_history import PurchaseHistoryHandler
from shop.application.view_cart import ViewCartHandler
from shop.domain.exceptions import CustomerNotFoundError
from shop.domain.model.customer import Customer
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.infrastructure.persistence.memory_customer_repository import (
    InMemoryCustomerRepository,
)
from shop.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)

ALICE = "alice@example.com"


def _setup():
    product_repo = InMemoryProductRepository([
        Product(name="Widget", price=Money.of("9.99"), quantity=10),
        Product(name="Gadget", price=Money.of("24.50"), quantity=5),
    ])
    customer_repo = InMemoryCustomerRepository([
        Customer(name="Alice", email=ALICE),
    ])
    return product_repo, customer_repo


def _fill_cart(product_repo, customer_repo) -> None:
    add = AddToCartHandler(product_repo, customer_repo)
    add.handle(ALICE, "Widget", 2)
    add.handle(ALICE, "Gadget", 1)


class TestViewCart:

    def test_view_after_add(self):
        product_repo, customer_repo = _setup()
        AddToCartHandler(product_repo, customer_repo).handle(ALICE, "Widget", 3)

        assert ViewCartHandler(customer_repo).handle(ALICE) == [CartLineDTO("Widget", 3)]

    def test_lines_keep_insertion_order(self):
        product_repo, customer_repo = _setup()
        _fill_cart(product_repo, customer_repo)

        lines = ViewCartHandler(customer_repo).handle(ALICE)

        assert [(l.product_name, l.quantity) for l in lines] == [("Widget", 2), ("Gadget", 1)]

    def test_empty_cart(self):
        _, customer_repo = _setup()
        assert ViewCartHandler(customer_repo).handle(ALICE) == []

    def test_unknown_customer(self):
        _, customer_repo = _setup()
        with pytest.raises(CustomerNotFoundError):
            ViewCartHandler(customer_repo).handle("nobody@example.com")


class TestCheckout:

    def test_checkout_clears_cart_and_keeps_stock(self):
        product_repo, customer_repo = _setup()
        _fill_cart(product_repo, customer_repo)

        CheckoutHandler(product_repo, customer_repo).handle(ALICE)

        assert ViewCartHandler(customer_repo).handle(ALICE) == []
        assert product_repo.get_by_name("Widget").quantity == 8
        assert product_repo.get_by_name("Gadget").quantity == 4

    def test_checkout_returns_purchase_with_total(self):
        product_repo, customer_repo = _setup()
        _fill_cart(product_repo, customer_repo)

        dto = CheckoutHandler(product_repo, customer_repo).handle(ALICE)

        assert dto.customer_email == ALICE
        assert dto.total == Money.of("44.48")
        assert dto.item_count == 3
        assert [(l.product_name, l.quantity, str(l.line_total)) for l in dto.lines] == [
            ("Widget", 2, "$19.98"),
            ("Gadget", 1, "$24.50"),
        ]

    def test_empty_cart_is_noop(self):
        product_repo, customer_repo = _setup()

        assert CheckoutHandler(product_repo, customer_repo).handle(ALICE) is None
        assert PurchaseHistoryHandler(customer_repo).handle(ALICE) == []

    def test_unknown_customer(self):
        product_repo, customer_repo = _setup()
        with pytest.raises(CustomerNotFoundError):
            CheckoutHandler(product_repo, customer_repo).handle("nobody@example.com")

    def test_new_cycle_after_checkout(self):
        product_repo, customer_repo = _setup()
        add = AddToCartHandler(product_repo, customer_repo)
        checkout = CheckoutHandler(product_repo, customer_repo)

        add.handle(ALICE, "Widget", 2)
        checkout.handle(ALICE)
        add.handle(ALICE, "Widget", 2)

        # The purchased units are not released by the second reservation
        assert product_repo.get_by_name("Widget").quantity == 6
        assert ViewCartHandler(customer_repo).handle(ALICE) == [CartLineDTO("Widget", 2)]


class TestPurchaseHistory:

    def test_history_oldest_first(self):
        product_repo, customer_repo = _setup()
        add = AddToCartHandler(product_repo, customer_repo)
        checkout = CheckoutHandler(product_repo, customer_repo)

        add.handle(ALICE, "Widget", 1)
        checkout.handle(ALICE)
        add.handle(ALICE, "Gadget", 2)
        checkout.handle(ALICE)

        history = PurchaseHistoryHandler(customer_repo).handle(ALICE)

        assert [h.lines[0].product_name for h in history] == ["Widget", "Gadget"]
        assert [str(h.total) for h in history] == ["$9.99", "$49.00"]

    def test_unknown_customer(self):
        _, customer_repo = _setup()
        with pytest.raises(CustomerNotFoundError):
            PurchaseHistoryHandler(customer_repo).handle("nobody@example.com")
