"""Application service: Update Product Price use case.

Orders already placed keep the unit prices they were placed with; carts
pick up the new price on their next read.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateProductPriceHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        product_id: int,
        price: str,
        discount_percentage: str | Decimal | None = None,
    ) -> None:
        new_price = Money.of(price)

        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            product.reprice(new_price, discount_percentage)
            uow.products.save(product)
            uow.commit()
