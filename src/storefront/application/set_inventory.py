"""Application service: Set Inventory use case.

Administrative, last write wins: the cell is overwritten with the given
level and created on first use.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import VariantKey
from storefront.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory
from storefront.domain.service.inventory_ledger import InventoryLedger


def ensure_variant_exists(uow: UnitOfWork, key: VariantKey) -> None:
    """Raise EntityNotFoundError unless the color and size belong to the product."""
    if uow.products.get_by_id(key.product_id) is None:
        raise EntityNotFoundError(f"Product #{key.product_id} not found")
    if uow.products.get_color(key.product_id, key.color_id) is None:
        raise EntityNotFoundError(
            f"Color #{key.color_id} not found for product #{key.product_id}"
        )
    if uow.products.get_size(key.product_id, key.size_id) is None:
        raise EntityNotFoundError(
            f"Size #{key.size_id} not found for product #{key.product_id}"
        )


class SetInventoryHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, color_id: int, size_id: int, quantity: int) -> int:
        """Set the stock level of one variant and return it."""
        key = VariantKey(product_id, color_id, size_id)
        if quantity < 0:
            raise ValidationError("Inventory quantity cannot be negative")

        with self._uow_factory() as uow:
            ensure_variant_exists(uow, key)
            cell = InventoryLedger(uow.inventory).adjust(key, quantity)
            uow.commit()

        return cell.quantity
