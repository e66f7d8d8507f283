"""CLI command that runs a script of shop operations against one store.

Each CLI invocation builds a fresh in-memory store from the seed, so
anything involving carts has to happen inside a single session.  A
script holds one command per line; blank lines and ``#`` comments are
skipped::

    add alice@example.com Widget 3
    cart alice@example.com
    checkout alice@example.com
"""

from __future__ import annotations

import shlex
from typing import Callable

import click

from shop.application.inventory_store import InventoryStore
from shop.domain.exceptions import DomainException
from shop.infrastructure.cli.display import (
    show_cart,
    show_customers,
    show_product,
    show_products,
    show_purchase,
)


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.UsageError(f"Invalid {what} '{raw}'.")


def _products(store: InventoryStore) -> None:
    show_products(store.list_products())


def _customers(store: InventoryStore) -> None:
    show_customers(store.list_customers())


def _show(store: InventoryStore, name: str) -> None:
    show_product(store.get_product(name))


def _new_product(store: InventoryStore, name: str, price: str, quantity: str) -> None:
    product = store.add_product(name, price, _parse_int(quantity, "quantity"))
    click.echo(f"Product '{product.name}' added at {product.price} ({product.quantity} in stock)")


def _new_customer(store: InventoryStore, name: str, email: str) -> None:
    customer = store.add_customer(name, email)
    click.echo(f"Customer '{customer.name}' <{customer.email}> added")


def _add(store: InventoryStore, email: str, product: str, quantity: str) -> None:
    qty = _parse_int(quantity, "quantity")
    store.add_to_cart(email, product, qty)
    click.echo(f"Reserved {qty} x {product} for {email}")


def _remove(store: InventoryStore, email: str, product: str) -> None:
    released = store.remove_from_cart(email, product)
    click.echo(f"Released {released} x {product} back to stock")


def _cart(store: InventoryStore, email: str) -> None:
    show_cart(email, store.view_cart(email))


def _checkout(store: InventoryStore, email: str) -> None:
    purchase = store.checkout(email)
    if purchase is None:
        click.echo(f"Cart of {email} is empty, nothing to check out.")
        return
    show_purchase(purchase)


def _history(store: InventoryStore, email: str) -> None:
    purchases = store.purchase_history(email)
    if not purchases:
        click.echo(f"No purchases for {email}.")
        return
    for purchase in purchases:
        show_purchase(purchase)


# verb -> (handler, number of arguments)
_COMMANDS: dict[str, tuple[Callable[..., None], int]] = {
    "products": (_products, 0),
    "customers": (_customers, 0),
    "show": (_show, 1),
    "new-product": (_new_product, 3),
    "new-customer": (_new_customer, 2),
    "add": (_add, 3),
    "remove": (_remove, 2),
    "cart": (_cart, 1),
    "checkout": (_checkout, 1),
    "history": (_history, 1),
}


def run_line(store: InventoryStore, line: str) -> None:
    """Parse and execute a single script line."""
    try:
        args = shlex.split(line)
    except ValueError as exc:
        raise click.UsageError(f"Cannot parse line: {exc}")

    verb, *rest = args
    command = _COMMANDS.get(verb.lower())
    if command is None:
        raise click.UsageError(f"Unknown command '{verb}'.")

    fn, arity = command
    if len(rest) != arity:
        raise click.UsageError(
            f"'{verb}' expects {arity} argument(s), got {len(rest)}."
        )
    fn(store, *rest)


@click.command("session")
@click.argument("script", type=click.File("r"), default="-")
@click.option("--strict", is_flag=True, default=False, help="Stop at the first failing command.")
@click.pass_obj
def session(store: InventoryStore, script, strict: bool) -> None:
    """Run shop commands from SCRIPT (or stdin) against one store."""
    failures = 0
    for lineno, raw in enumerate(script, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            run_line(store, line)
        except DomainException as exc:
            message = str(exc)
        except click.UsageError as exc:
            message = exc.format_message()
        else:
            continue

        if strict:
            raise click.ClickException(f"line {lineno}: {message}")
        click.echo(f"line {lineno}: error: {message}", err=True)
        failures += 1

    if failures:
        click.echo(f"{failures} command(s) failed.", err=True)
