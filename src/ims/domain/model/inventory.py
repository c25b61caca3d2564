"""InventoryManager — sole owner of the tracked product collection.

Products are kept in insertion order and are unique by id. Callers never
get a reference to a managed product: every read hands back a detached
copy, so the only way to change stock is through this class.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from decimal import Decimal

from ims.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class InventoryManager:
    """Aggregate root for the inventory collection.

    Invariants:
    - product ids are unique across the collection
    - insertion order of the remaining products is preserved

    All collection access goes through one re-entrant lock, which makes
    ``add_new_product`` an atomic allocate-and-add. The class is still
    meant for a single caller; the lock only protects the invariants.
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: list[Product] = []
        self._lock = threading.RLock()
        for product in products or []:
            self.add_product(product)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return self._find(product_id) is not None

    # --- Commands -------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Append a product. Raises DuplicateEntityError on an id collision."""
        with self._lock:
            if self._find(product.id) is not None:
                logger.info("Rejected duplicate product id %s", product.id)
                raise DuplicateEntityError(
                    f"Product with ID {product.id} already exists", product.id
                )
            self._products.append(product.copy())
            logger.debug("Added product %s (%s)", product.id, product.name)

    def add_new_product(
        self, name: str, quantity: int, price: Money | str | int | Decimal
    ) -> Product:
        """Allocate the next id and add the product in one step."""
        with self._lock:
            product = Product.create(self.next_product_id(), name, quantity, price)
            self.add_product(product)
            return product.copy()

    def remove_product(self, product_id: int) -> Product:
        """Delete the product with ``product_id`` and return a copy of it.

        Raises EntityNotFoundError if no product has that id.
        """
        with self._lock:
            product = self._require(product_id)
            self._products.remove(product)
            logger.debug("Removed product %s", product_id)
            return product.copy()

    def update_product(self, product_id: int, new_quantity: int) -> Product:
        """Set the stock level of an existing product.

        Negative quantities are rejected with ValidationError, the same
        rule a new product is held to; the product is left unchanged.
        Returns a copy of the updated product.
        """
        with self._lock:
            product = self._require(product_id)
            old_quantity = product.quantity_in_stock
            product.set_quantity(new_quantity)
            logger.debug(
                "Updated product %s quantity %s -> %s",
                product_id, old_quantity, new_quantity,
            )
            return product.copy()

    # --- Queries --------------------------------------------------------------

    def list_products(self) -> tuple[Product, ...]:
        """Snapshot of every product, in insertion order."""
        with self._lock:
            return tuple(p.copy() for p in self._products)

    def get_product(self, product_id: int) -> Product:
        with self._lock:
            return self._require(product_id).copy()

    def get_total_value(self) -> Money:
        """Sum of quantity * price over the collection; zero when empty."""
        with self._lock:
            return sum((p.total_value() for p in self._products), Money.zero())

    def next_product_id(self) -> int:
        """One past the highest id in use, or 1 for an empty collection."""
        with self._lock:
            return max((p.id for p in self._products), default=0) + 1

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: object) -> Product | None:
        if isinstance(product_id, bool):
            return None
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def _require(self, product_id: int) -> Product:
        product = self._find(product_id)
        if product is None:
            logger.info("Product %s not found", product_id)
            raise EntityNotFoundError(
                f"Product with ID {product_id} not found", product_id
            )
        return product
