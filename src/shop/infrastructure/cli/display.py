"""Shared table formatting for the CLI commands."""

from __future__ import annotations

import click

from shop.application.dto import CartLineDTO, CustomerDTO, ProductDTO, PurchaseDTO


def show_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 40)
    for p in products:
        click.echo(f"{p.name:<20} {str(p.price):>10} {p.quantity:>8}")


def show_product(product: ProductDTO) -> None:
    click.echo(f"Name:     {product.name}")
    click.echo(f"Price:    {product.price}")
    click.echo(f"In stock: {product.quantity}")


def show_cart(email: str, lines: list[CartLineDTO]) -> None:
    if not lines:
        click.echo(f"Cart of {email} is empty.")
        return

    click.echo(f"Cart of {email}")
    click.echo(f"  {'Product':<20} {'Qty':>5}")
    click.echo(f"  {'-'*26}")
    for line in lines:
        click.echo(f"  {line.product_name:<20} {line.quantity:>5}")


def show_purchase(purchase: PurchaseDTO) -> None:
    click.echo(
        f"Purchase by {purchase.customer_email} "
        f"on {purchase.created_at.strftime('%Y-%m-%d %H:%M UTC')} "
        f"({purchase.item_count} item(s))"
    )
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in purchase.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} "
            f"{str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Purchase Total':<27} {str(purchase.total):>20}")


def show_customers(customers: list[CustomerDTO]) -> None:
    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'Name':<20} {'Email':<30}")
    click.echo("-" * 51)
    for c in customers:
        click.echo(f"{c.name:<20} {c.email:<30}")
