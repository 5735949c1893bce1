"""Abstract repository for a user's address book."""

from __future__ import annotations

from abc import abstractmethod

from storefront.domain.model.customer import Address
from storefront.domain.repository.candidate_repository import CandidateRepository


class AddressRepository(CandidateRepository):

    @abstractmethod
    def get(self, user_id: int, address_id: int) -> Address | None:
        """Return the address if it belongs to the user, else None."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[Address]:
        """Return the user's addresses, default first, then newest first."""

    @abstractmethod
    def add(self, address: Address) -> Address:
        """Insert a new address and assign its id. The flag starts cleared."""

    @abstractmethod
    def update(self, address: Address) -> None:
        """Persist the editable fields (never the default flag)."""
