"""Composition root — wires concrete implementations to the store.

This is the only place in the codebase that knows about *all* layers.
It builds exactly one InventoryStore per call; the CLI calls it once per
process and passes the instance along.
"""

from __future__ import annotations

import logging

from shop.application.inventory_store import InventoryStore
from shop.infrastructure.config import Settings
from shop.infrastructure.seed_loader import load_seed

LOGGER = logging.getLogger(__name__)


def build_store(settings: Settings | None = None) -> InventoryStore:
    settings = settings or Settings.from_env()
    LOGGER.debug("Building store with %s", settings)
    product_repo, customer_repo = load_seed(settings.seed_path)
    return InventoryStore(
        product_repo,
        customer_repo,
        release_superseded=settings.release_superseded_reservations,
    )
