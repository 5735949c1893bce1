"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int, for_update: bool = False) -> Order | None:
        """Return an order with its lines, or None if not found."""

    @abstractmethod
    def list_all(self, user_id: int | None = None) -> list[Order]:
        """Return orders newest first, optionally only one user's."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Insert a new order with its lines and assign ids."""

    @abstractmethod
    def save_status(self, order: Order) -> None:
        """Persist the two status fields; nothing else is ever rewritten."""
