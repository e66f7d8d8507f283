"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from shop.application.inventory_store import InventoryStore
from shop.domain.exceptions import DomainException
from shop.infrastructure.cli.display import show_product, show_products


@click.command("products")
@click.pass_obj
def product_list(store: InventoryStore) -> None:
    """List all products in the catalog."""
    show_products(store.list_products())


@click.command("product")
@click.argument("name")
@click.pass_obj
def product_show(store: InventoryStore, name: str) -> None:
    """Show details of a single product."""
    try:
        product = store.get_product(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    show_product(product)
