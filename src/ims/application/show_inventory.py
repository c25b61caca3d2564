"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from ims.application.dto import InventoryReportDTO, to_product_dto
from ims.domain.model.inventory import InventoryManager


class ShowInventoryHandler:

    def __init__(self, manager: InventoryManager, currency_symbol: str = "$") -> None:
        self._manager = manager
        self._currency_symbol = currency_symbol

    def handle(self) -> InventoryReportDTO:
        products = self._manager.list_products()
        return InventoryReportDTO(
            items=tuple(to_product_dto(p, self._currency_symbol) for p in products),
            total_value=self._manager.get_total_value().format(self._currency_symbol),
        )
