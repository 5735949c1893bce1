"""Application service: List Addresses use case (query)."""

from __future__ import annotations

from storefront.application.dto import AddressDTO
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class ListAddressesHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int) -> list[AddressDTO]:
        with self._uow_factory() as uow:
            return [AddressDTO.from_domain(a) for a in uow.addresses.list_for_user(user_id)]
