"""Application service: Update Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO, to_product_dto
from ims.domain.model.inventory import InventoryManager


class UpdateProductHandler:

    def __init__(self, manager: InventoryManager, currency_symbol: str = "$") -> None:
        self._manager = manager
        self._currency_symbol = currency_symbol

    def handle(self, product_id: int, new_quantity: int) -> ProductDTO:
        """Set a product's stock level.

        Only the quantity changes; name and price are left as they were.
        """
        product = self._manager.update_product(product_id, new_quantity)
        return to_product_dto(product, self._currency_symbol)
