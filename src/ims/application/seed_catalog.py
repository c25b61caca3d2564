"""Application service: Seed Catalog use case.

Preloads a fresh inventory with a fixed starter catalog so the menu has
something to show on first use. IDs are sequential from 1 in catalog order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ims.domain.model.inventory import InventoryManager
from ims.domain.model.product import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    quantity: int
    price: str


STARTER_CATALOG: tuple[CatalogEntry, ...] = (
    # Electronics
    CatalogEntry("Smartphone", 150, "9999.99"),
    CatalogEntry("Laptop", 80, "45000.00"),
    CatalogEntry("Bluetooth Headphones", 200, "2500.00"),
    # Kitchen appliances
    CatalogEntry("Rice Cooker", 120, "2500.00"),
    CatalogEntry("Blender", 100, "1500.00"),
    CatalogEntry("Electric Fan", 150, "2000.00"),
    # Home decor
    CatalogEntry("Wall Clock", 50, "500.00"),
    CatalogEntry("Throw Blanket", 75, "1000.00"),
    # Outdoor & sports
    CatalogEntry("Camping Tent", 60, "4000.00"),
    CatalogEntry("Yoga Mat", 100, "800.00"),
)


class SeedCatalogHandler:

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager

    def handle(self, catalog: Sequence[CatalogEntry] = STARTER_CATALOG) -> int:
        """Add every catalog entry with IDs 1..n and return how many were added.

        Fails with DuplicateEntityError if the inventory already holds one
        of those IDs; entries added before the collision stay in place.
        """
        for product_id, entry in enumerate(catalog, start=1):
            self._manager.add_product(
                Product.create(product_id, entry.name, entry.quantity, entry.price)
            )
        logger.info("Seeded inventory with %d products", len(catalog))
        return len(catalog)
