"""Abstract repository for rows that take part in a singleton flag.

An owner (a user, a product) has a set of candidates (addresses, images);
at most one candidate per owner carries the flag. Concrete repositories
map the flag onto their own column (``is_default``, ``is_primary``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CandidateRepository(ABC):

    @abstractmethod
    def lock_owner(self, owner_id: int) -> bool:
        """Lock the owner row until the transaction ends.

        Returns False if the owner does not exist.
        """

    @abstractmethod
    def candidate_ids(self, owner_id: int) -> list[int]:
        """Return the ids of all the owner's candidates, ascending."""

    @abstractmethod
    def flagged_ids(self, owner_id: int) -> list[int]:
        """Return the ids of the owner's candidates that carry the flag."""

    @abstractmethod
    def belongs_to(self, owner_id: int, candidate_id: int) -> bool:
        """True if the candidate exists and is owned by the owner."""

    @abstractmethod
    def set_flag(self, candidate_id: int, value: bool) -> None:
        """Set or clear the flag on one candidate."""

    @abstractmethod
    def clear_flags(self, owner_id: int) -> None:
        """Clear the flag on every candidate of the owner."""

    @abstractmethod
    def delete(self, owner_id: int, candidate_id: int) -> None:
        """Remove the candidate."""
