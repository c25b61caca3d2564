"""Composition root — wires the inventory for a CLI session.

This is the only place in the codebase that knows about *all* layers.
State lives for the life of the process; nothing is written to disk.
"""

from __future__ import annotations

from ims.application.seed_catalog import SeedCatalogHandler
from ims.domain.model.inventory import InventoryManager
from ims.infrastructure.settings import Settings


def inventory_manager(settings: Settings) -> InventoryManager:
    manager = InventoryManager()
    if settings.seed_catalog:
        SeedCatalogHandler(manager).handle()
    return manager
