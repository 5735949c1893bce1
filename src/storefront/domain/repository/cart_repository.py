"""Abstract repository for CartLine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import VariantKey


class CartRepository(ABC):

    @abstractmethod
    def get(self, user_id: int, line_id: int) -> CartLine | None:
        """Return the line if it belongs to the user, else None."""

    @abstractmethod
    def find(self, user_id: int, key: VariantKey) -> CartLine | None:
        """Return the user's line for a variant, or None."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[CartLine]:
        """Return the user's lines in ascending id order."""

    @abstractmethod
    def add(self, line: CartLine) -> CartLine:
        """Insert a new line and assign its id."""

    @abstractmethod
    def save(self, line: CartLine) -> None:
        """Persist a quantity change."""

    @abstractmethod
    def delete(self, user_id: int, line_id: int) -> None:
        """Remove one line."""

    @abstractmethod
    def clear(self, user_id: int) -> int:
        """Remove all of a user's lines and return how many there were."""
