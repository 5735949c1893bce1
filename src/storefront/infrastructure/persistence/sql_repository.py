"""Shared plumbing for the SQLAlchemy-backed repositories."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.domain.exceptions import ConflictError


class SqlRepository:

    def __init__(self, session: Session) -> None:
        self._session = session

    def _flush(self) -> None:
        """Push pending writes so ids are assigned and constraints checked now."""
        try:
            self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(f"Store rejected the write: {exc.orig}") from exc


class SqlCandidateRepository(SqlRepository):
    """CandidateRepository over a child table with a boolean flag column.

    Subclasses name the child row class, its owner row class, the foreign
    key column and the flag column.
    """

    row_class: type
    owner_row_class: type
    owner_column: str
    flag_column: str

    def lock_owner(self, owner_id: int) -> bool:
        stmt = (
            select(self.owner_row_class.id)
            .where(self.owner_row_class.id == owner_id)
            .with_for_update()
        )
        return self._session.execute(stmt).scalar_one_or_none() is not None

    def candidate_ids(self, owner_id: int) -> list[int]:
        stmt = (
            select(self.row_class.id)
            .where(self._owner_col == owner_id)
            .order_by(self.row_class.id)
        )
        return list(self._session.execute(stmt).scalars())

    def flagged_ids(self, owner_id: int) -> list[int]:
        stmt = (
            select(self.row_class.id)
            .where(self._owner_col == owner_id, self._flag_col.is_(True))
            .order_by(self.row_class.id)
        )
        return list(self._session.execute(stmt).scalars())

    def belongs_to(self, owner_id: int, candidate_id: int) -> bool:
        stmt = select(self.row_class.id).where(
            self.row_class.id == candidate_id, self._owner_col == owner_id
        )
        return self._session.execute(stmt).scalar_one_or_none() is not None

    def set_flag(self, candidate_id: int, value: bool) -> None:
        self._session.execute(
            update(self.row_class)
            .where(self.row_class.id == candidate_id)
            .values({self.flag_column: value})
        )

    def clear_flags(self, owner_id: int) -> None:
        self._session.execute(
            update(self.row_class)
            .where(self._owner_col == owner_id, self._flag_col.is_(True))
            .values({self.flag_column: False})
        )

    def delete(self, owner_id: int, candidate_id: int) -> None:
        row = self._session.get(self.row_class, candidate_id)
        if row is not None and getattr(row, self.owner_column) == owner_id:
            self._session.delete(row)
            self._flush()

    @property
    def _owner_col(self):
        return getattr(self.row_class, self.owner_column)

    @property
    def _flag_col(self):
        return getattr(self.row_class, self.flag_column)
