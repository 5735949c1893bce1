"""Application service: Update Address use case.

Field edits are plain; the default flag is not. Asking for the default
moves the flag here, and giving it up moves it to the newest other
address, unless this is the user's only address, which always stays
the default.
"""

from __future__ import annotations

from storefront.application.dto import CandidateResult
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.customer import AddressFields
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.singleton_flag_maintainer import SingletonFlagMaintainer


class UpdateAddressHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        user_id: int,
        address_id: int,
        fields: AddressFields,
        is_default: bool,
    ) -> CandidateResult:
        fields.validate()

        with self._uow_factory() as uow:
            uow.addresses.lock_owner(user_id)
            address = uow.addresses.get(user_id, address_id)
            if address is None:
                raise EntityNotFoundError(f"Address #{address_id} not found")

            address.edit(fields)
            uow.addresses.update(address)

            maintainer = SingletonFlagMaintainer(uow.addresses, label="address")
            if is_default and not address.is_default:
                maintainer.set_default(user_id, address_id)
                effective = True
            elif not is_default and address.is_default:
                effective = maintainer.on_flag_cleared(user_id, address_id)
            else:
                effective = address.is_default
            uow.commit()

        return CandidateResult(id=address_id, is_default=effective)
