"""Application service: Delete Address use case.

Deleting the default address promotes the newest remaining address in the
same transaction; if the promotion fails the delete is rolled back too.
An address referenced by an order cannot be deleted (ConflictError).
"""

from __future__ import annotations

from storefront.application.dto import DeletionResult
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.singleton_flag_maintainer import SingletonFlagMaintainer


class DeleteAddressHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int, address_id: int) -> DeletionResult:
        with self._uow_factory() as uow:
            uow.addresses.lock_owner(user_id)
            address = uow.addresses.get(user_id, address_id)
            if address is None:
                raise EntityNotFoundError(f"Address #{address_id} not found")

            uow.addresses.delete(user_id, address_id)
            promoted = SingletonFlagMaintainer(
                uow.addresses, label="address"
            ).on_candidate_deleted(user_id, address_id, was_default=address.is_default)
            uow.commit()

        return DeletionResult(promoted_id=promoted)
