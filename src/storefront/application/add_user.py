"""Application service: Add User use case (administrative)."""

from __future__ import annotations

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.customer import User
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class AddUserHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str, email: str) -> int:
        user = User.create(name, email)

        with self._uow_factory() as uow:
            if uow.users.get_by_email(user.email) is not None:
                raise ConflictError(f"A user with e-mail {user.email} already exists")
            uow.users.add(user)
            uow.commit()

        return user.id  # type: ignore[return-value]
