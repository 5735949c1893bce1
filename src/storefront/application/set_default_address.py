"""Application service: Set Default Address use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.singleton_flag_maintainer import SingletonFlagMaintainer


class SetDefaultAddressHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int, address_id: int) -> None:
        with self._uow_factory() as uow:
            if not uow.addresses.lock_owner(user_id):
                raise EntityNotFoundError(f"Address #{address_id} not found")
            SingletonFlagMaintainer(uow.addresses, label="address").set_default(
                user_id, address_id
            )
            uow.commit()
