"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.application.dto import ProductDTO, to_product_dto
from ims.domain.model.inventory import InventoryManager

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, manager: InventoryManager, currency_symbol: str = "$") -> None:
        self._manager = manager
        self._currency_symbol = currency_symbol

    def handle(self, name: str, quantity: int, price: str | Decimal) -> ProductDTO:
        """Add a new product with the next free ID.

        IDs are assigned as one past the highest ID in use (1 when the
        inventory is empty). Allocation and insertion happen as a single
        step on the manager so two callers can never be handed the same ID.
        """
        product = self._manager.add_new_product(name.strip(), quantity, price)
        logger.info("Product #%s '%s' added", product.id, product.name)
        return to_product_dto(product, self._currency_symbol)
