"""Domain service: Inventory Ledger.

Stock lives in one InventoryCell per (product, color, size). The ledger is
transaction scoped: it is built on the repositories of an open unit of
work, and every mutating method reads its cell through
``get_for_update`` so the read, the check and the write all happen under
the cell's row lock. Two concurrent reservations against the same cell
therefore serialize instead of both passing the availability check.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.inventory import InventoryCell
from storefront.domain.model.value_objects import VariantKey
from storefront.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class InventoryLedger:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def check_available(self, key: VariantKey) -> int:
        """Return the quantity on hand; a missing cell counts as zero."""
        cell = self._inventory_repo.get(key)
        return cell.quantity if cell is not None else 0

    def reserve(self, key: VariantKey, quantity: int) -> int:
        """Decrement the cell by *quantity* and return what is left.

        Raises InsufficientStockError (carrying the available quantity) if
        the cell is missing or short. The caller must let that error roll
        back its whole transaction.
        """
        if quantity <= 0:
            raise ValidationError("Reservation quantity must be positive")
        cell = self._inventory_repo.get_for_update(key)
        if cell is None:
            raise InsufficientStockError(
                key.product_id, key.color_id, key.size_id, available=0, requested=quantity
            )
        cell.reserve(quantity)
        self._inventory_repo.save(cell)
        return cell.quantity

    def release(self, key: VariantKey, quantity: int) -> int:
        """Return *quantity* units to the cell and return the new level."""
        cell = self._inventory_repo.get_for_update(key) or InventoryCell(key=key)
        cell.release(quantity)
        self._inventory_repo.save(cell)
        return cell.quantity

    def adjust(self, key: VariantKey, quantity: int) -> InventoryCell:
        """Set the stock level outright, creating the cell on first use."""
        cell = self._inventory_repo.get_for_update(key) or InventoryCell(key=key)
        previous = cell.quantity
        cell.adjust(quantity)
        self._inventory_repo.save(cell)
        logger.info("Inventory %s adjusted %d -> %d", key, previous, quantity)
        return cell
