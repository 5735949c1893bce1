"""Application service: Reserve Inventory use case.

A stand-alone reservation in its own transaction. Checkout does not go
through this handler; it reserves inside its own unit of work.
"""

from __future__ import annotations

from storefront.domain.model.value_objects import Quantity, VariantKey
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.inventory_ledger import InventoryLedger


class ReserveInventoryHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, color_id: int, size_id: int, quantity: int) -> int:
        """Reserve *quantity* units and return the quantity left."""
        key = VariantKey(product_id, color_id, size_id)
        qty = Quantity(quantity)

        with self._uow_factory() as uow:
            remaining = InventoryLedger(uow.inventory).reserve(key, qty.value)
            uow.commit()

        return remaining
