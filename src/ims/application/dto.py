"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    quantity_in_stock: int
    price: str  # formatted, e.g. "$15.00"
    total_value: str


@dataclass(frozen=True)
class InventoryReportDTO:
    """Output: every tracked product plus the inventory valuation."""

    items: tuple[ProductDTO, ...]
    total_value: str

    @property
    def is_empty(self) -> bool:
        return not self.items


def to_product_dto(product: Product, currency_symbol: str = "$") -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        quantity_in_stock=product.quantity_in_stock,
        price=product.price.format(currency_symbol),
        total_value=product.total_value().format(currency_symbol),
    )
