"""Application services: Show Order and List Orders use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int, user_id: int | None = None) -> OrderDTO:
        """Return one order; with *user_id*, other users' orders are not found."""
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None or (user_id is not None and order.user_id != user_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return OrderDTO.from_domain(order)


class ListOrdersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int | None = None) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            orders = uow.orders.list_all(user_id)
        return [OrderDTO.from_domain(o) for o in orders]
