"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.cart_aggregator import CartAggregator


class ShowCartHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int) -> CartDTO:
        with self._uow_factory() as uow:
            view = CartAggregator(uow.cart, uow.products, uow.inventory).materialize(user_id)
        return CartDTO.from_view(view)
