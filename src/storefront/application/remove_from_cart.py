"""Application services: Remove From Cart and Clear Cart use cases."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class RemoveFromCartHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int, line_id: int) -> None:
        with self._uow_factory() as uow:
            if uow.cart.get(user_id, line_id) is None:
                raise EntityNotFoundError(f"Cart item #{line_id} not found")
            uow.cart.delete(user_id, line_id)
            uow.commit()


class ClearCartHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int) -> int:
        """Empty the user's cart and return how many lines were removed."""
        with self._uow_factory() as uow:
            removed = uow.cart.clear(user_id)
            uow.commit()
        return removed
