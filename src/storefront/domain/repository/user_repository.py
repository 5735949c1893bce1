"""Abstract repository for User."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by id, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by e-mail, or None."""

    @abstractmethod
    def add(self, user: User) -> User:
        """Insert a new user and assign its id."""

    @abstractmethod
    def lock(self, user_id: int) -> bool:
        """Lock the user row for the rest of the transaction; False if absent.

        Cart writes and checkout take this lock first so that two requests
        from the same user see each other's cart changes.
        """
