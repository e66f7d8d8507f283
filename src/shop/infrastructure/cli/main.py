from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import build_store
from shop.infrastructure.cli.customer_commands import customer_list
from shop.infrastructure.cli.product_commands import product_list, product_show
from shop.infrastructure.cli.session_commands import session
from shop.infrastructure.config import LOG_LEVELS, Settings, configure_logging


@click.group()
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with the initial products and customers.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity.",
)
@click.option(
    "--release-superseded/--keep-superseded",
    default=None,
    help="Return a replaced reservation's units to stock (default) or keep them consumed.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    seed_path: Path | None,
    log_level: str | None,
    release_superseded: bool | None,
) -> None:
    """Shop — in-memory catalog and cart store"""
    settings = Settings.from_env()
    overrides: dict[str, object] = {}
    if seed_path is not None:
        overrides["seed_path"] = seed_path
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if release_superseded is not None:
        overrides["release_superseded_reservations"] = release_superseded
    settings = dataclasses.replace(settings, **overrides)

    configure_logging(settings.log_level)
    try:
        ctx.obj = build_store(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


# Register subcommands
cli.add_command(customer_list)
cli.add_command(product_list)
cli.add_command(product_show)
cli.add_command(session)
