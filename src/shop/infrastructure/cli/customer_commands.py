"""CLI commands for browsing customers."""

from __future__ import annotations

import click

from shop.application.inventory_store import InventoryStore
from shop.infrastructure.cli.display import show_customers


@click.command("customers")
@click.pass_obj
def customer_list(store: InventoryStore) -> None:
    """List all registered customers."""
    show_customers(store.list_customers())
