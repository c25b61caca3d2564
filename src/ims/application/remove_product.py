"""Application service: Remove Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO, to_product_dto
from ims.domain.model.inventory import InventoryManager


class RemoveProductHandler:

    def __init__(self, manager: InventoryManager, currency_symbol: str = "$") -> None:
        self._manager = manager
        self._currency_symbol = currency_symbol

    def handle(self, product_id: int) -> ProductDTO:
        """Remove a product and return what was removed."""
        product = self._manager.remove_product(product_id)
        return to_product_dto(product, self._currency_symbol)
