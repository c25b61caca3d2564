"""Product entity — one inventory line item.

A product validates itself at construction and whenever its stock level
changes, so an invalid product can never be observed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money


# Highest unit price a product may carry.
MAX_PRICE = Decimal("1000000000000")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(eq=False)
class Product:
    """A tracked inventory item.

    Invariants:
    - ``id`` is a positive integer and never changes once set
    - ``name`` is not blank
    - ``quantity_in_stock`` is always >= 0
    - ``price`` is a non-negative Money amount no greater than MAX_PRICE

    Two products are the same product when their ids match; the other
    attributes take no part in equality.
    """

    id: int
    name: str
    quantity_in_stock: int
    price: Money

    def __post_init__(self) -> None:
        if not _is_int(self.id) or self.id <= 0:
            raise ValidationError(
                f"Product ID must be greater than zero, got {self.id!r}", field="id"
            )
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Product name cannot be empty", field="name")
        self._check_quantity(self.quantity_in_stock)
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}",
                field="price",
            )
        if self.price.amount > MAX_PRICE:
            raise ValidationError(
                f"Product price cannot exceed {MAX_PRICE:,}, got {self.price.amount}",
                field="price",
            )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Product ID cannot be changed")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # --- Behaviour ------------------------------------------------------------

    def total_value(self) -> Money:
        return self.price * self.quantity_in_stock

    def set_quantity(self, new_quantity: int) -> None:
        """Replace the stock level, keeping the non-negative invariant."""
        self._check_quantity(new_quantity)
        self.quantity_in_stock = new_quantity

    def copy(self) -> Product:
        """Detached copy; changes to it never reach this instance."""
        return Product(self.id, self.name, self.quantity_in_stock, self.price)

    def __str__(self) -> str:
        return (
            f"Product ID: {self.id}, Name: {self.name}, "
            f"Quantity in Stock: {self.quantity_in_stock}, Price: {self.price}"
        )

    # --- Factory --------------------------------------------------------------

    @classmethod
    def create(
        cls,
        product_id: int,
        name: str,
        quantity: int,
        price: Money | str | int | float | Decimal,
    ) -> Product:
        """Build a product from primitive values, coercing the price."""
        if not isinstance(price, Money):
            try:
                price = Money.of(price)
            except ValidationError as exc:
                raise ValidationError(
                    f"Invalid product price {price!r}: {exc}", field="price"
                ) from exc
        return cls(id=product_id, name=name, quantity_in_stock=quantity, price=price)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _check_quantity(quantity: Any) -> None:
        if not _is_int(quantity):
            raise ValidationError(
                f"Quantity in stock must be an integer, got {type(quantity).__name__}",
                field="quantity_in_stock",
            )
        if quantity < 0:
            raise ValidationError(
                f"Quantity in stock cannot be negative, got {quantity}",
                field="quantity_in_stock",
            )
