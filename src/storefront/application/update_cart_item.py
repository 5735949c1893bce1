"""Application service: Update Cart Item use case."""

from __future__ import annotations

from storefront.application.add_to_cart import ensure_in_stock
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateCartItemHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int, line_id: int, quantity: int) -> None:
        qty = Quantity(quantity)

        with self._uow_factory() as uow:
            line = uow.cart.get(user_id, line_id)
            if line is None:
                raise EntityNotFoundError(f"Cart item #{line_id} not found")
            ensure_in_stock(uow, line.key, qty)
            line.change_quantity(qty)
            uow.cart.save(line)
            uow.commit()
