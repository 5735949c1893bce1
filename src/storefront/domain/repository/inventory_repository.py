"""Abstract repository for InventoryCell."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.inventory import InventoryCell
from storefront.domain.model.value_objects import VariantKey


class InventoryRepository(ABC):

    @abstractmethod
    def get(self, key: VariantKey) -> InventoryCell | None:
        """Return the cell for a variant without locking it, or None."""

    @abstractmethod
    def get_for_update(self, key: VariantKey) -> InventoryCell | None:
        """Return the cell for a variant, row-locked until the transaction ends."""

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[InventoryCell]:
        """Return every cell of a product."""

    @abstractmethod
    def save(self, cell: InventoryCell) -> None:
        """Insert or update a cell."""
