"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: int
    color_id: int
    size_id: int
    quantity: int


class ShowInventoryHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> list[InventoryLineDTO]:
        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            cells = uow.inventory.list_for_product(product_id)

        return [
            InventoryLineDTO(
                product_id=cell.key.product_id,
                color_id=cell.key.color_id,
                size_id=cell.key.size_id,
                quantity=cell.quantity,
            )
            for cell in cells
        ]
