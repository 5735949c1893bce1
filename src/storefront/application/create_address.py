"""Application service: Create Address use case.

The insert and the default-flag decision run in one transaction, after
the user row has been locked, so two concurrent "first address" inserts
cannot both end up default (or both end up not default).
"""

from __future__ import annotations

from storefront.application.dto import CandidateResult
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.customer import Address, AddressFields
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.singleton_flag_maintainer import SingletonFlagMaintainer


class CreateAddressHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self, user_id: int, fields: AddressFields, is_default: bool = False
    ) -> CandidateResult:
        address = Address.create(user_id, fields)

        with self._uow_factory() as uow:
            if not uow.addresses.lock_owner(user_id):
                raise EntityNotFoundError(f"User #{user_id} not found")
            uow.addresses.add(address)
            maintainer = SingletonFlagMaintainer(uow.addresses, label="address")
            effective = maintainer.on_candidate_created(user_id, address.id, is_default)  # type: ignore[arg-type]
            uow.commit()

        return CandidateResult(id=address.id, is_default=effective)  # type: ignore[arg-type]
