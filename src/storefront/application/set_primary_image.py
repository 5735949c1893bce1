"""Application service: Set Primary Image use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.singleton_flag_maintainer import SingletonFlagMaintainer


class SetPrimaryImageHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, image_id: int) -> None:
        with self._uow_factory() as uow:
            if not uow.images.lock_owner(product_id):
                raise EntityNotFoundError(f"Product #{product_id} not found")
            SingletonFlagMaintainer(uow.images, label="image").set_default(
                product_id, image_id
            )
            uow.commit()
