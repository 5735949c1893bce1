"""Domain service: singleton flag maintenance.

Keeps "exactly one flagged candidate per owner whenever the owner has any
candidates" true for default addresses and primary images. Every method
must run inside the caller's open unit of work, after the owner row has
been locked with ``lock_owner``, so the read of the candidate set and the
flag writes that follow it cannot interleave with another request's.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.candidate_repository import CandidateRepository

logger = logging.getLogger(__name__)


class SingletonFlagMaintainer:

    def __init__(self, candidates: CandidateRepository, label: str = "candidate") -> None:
        self._candidates = candidates
        self._label = label

    def set_default(self, owner_id: int, candidate_id: int) -> None:
        """Move the flag to *candidate_id*, clearing it everywhere else."""
        if not self._candidates.belongs_to(owner_id, candidate_id):
            raise EntityNotFoundError(
                f"{self._label.capitalize()} #{candidate_id} not found"
            )
        self._candidates.clear_flags(owner_id)
        self._candidates.set_flag(candidate_id, True)
        logger.info(
            "Flagged %s %s as default for owner %s", self._label, candidate_id, owner_id
        )

    def on_candidate_created(
        self, owner_id: int, candidate_id: int, requested_default: bool
    ) -> bool:
        """Settle the flag after a candidate was inserted.

        A requested default takes the flag. Otherwise the new candidate is
        promoted only if the owner has no flagged candidate at all, which
        is always the case for an owner's first candidate.

        Returns the effective flag of the new candidate.
        """
        if requested_default:
            self.set_default(owner_id, candidate_id)
            return True

        if not self._candidates.flagged_ids(owner_id):
            self._candidates.set_flag(candidate_id, True)
            logger.info(
                "Promoted %s %s: owner %s had no default", self._label, candidate_id, owner_id
            )
            return True
        return False

    def on_candidate_deleted(
        self, owner_id: int, candidate_id: int, was_default: bool
    ) -> int | None:
        """Re-promote after the flagged candidate was deleted.

        The newest remaining candidate (highest id) takes the flag. Returns
        its id, or None if nothing needed promoting.
        """
        if not was_default:
            return None
        remaining = [
            cid for cid in self._candidates.candidate_ids(owner_id) if cid != candidate_id
        ]
        if not remaining:
            return None
        promoted = max(remaining)
        self._candidates.set_flag(promoted, True)
        logger.info(
            "Promoted %s %s after deleting default %s", self._label, promoted, candidate_id
        )
        return promoted

    def on_flag_cleared(self, owner_id: int, candidate_id: int) -> bool:
        """Handle a request to un-default *candidate_id*.

        A lone candidate always stays the default. Otherwise the flag moves
        to the newest other candidate. Returns the effective flag of
        *candidate_id*.
        """
        if not self._candidates.belongs_to(owner_id, candidate_id):
            raise EntityNotFoundError(
                f"{self._label.capitalize()} #{candidate_id} not found"
            )
        others = [
            cid for cid in self._candidates.candidate_ids(owner_id) if cid != candidate_id
        ]
        if not others:
            self._candidates.set_flag(candidate_id, True)
            return True
        if candidate_id not in self._candidates.flagged_ids(owner_id):
            return False
        self.set_default(owner_id, max(others))
        return False
