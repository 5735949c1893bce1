"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import select

from storefront.domain.model.customer import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.sql_repository import SqlRepository
from storefront.infrastructure.persistence.tables import UserRow


class SqlUserRepository(SqlRepository, UserRepository):

    def get_by_id(self, user_id: int) -> User | None:
        row = self._session.get(UserRow, user_id)
        return self._to_domain(row) if row is not None else None

    def get_by_email(self, email: str) -> User | None:
        row = self._session.execute(
            select(UserRow).where(UserRow.email == email.strip().lower())
        ).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def add(self, user: User) -> User:
        row = UserRow(name=user.name, email=user.email)
        self._session.add(row)
        self._flush()
        user.id = row.id
        return user

    def lock(self, user_id: int) -> bool:
        stmt = select(UserRow.id).where(UserRow.id == user_id).with_for_update()
        return self._session.execute(stmt).scalar_one_or_none() is not None

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(id=row.id, name=row.name, email=row.email)
