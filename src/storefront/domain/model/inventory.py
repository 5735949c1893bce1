"""InventoryCell: the stock counter for one (product, color, size) variant.

Cells are created lazily on first stock assignment. The quantity is the
number of units still available for sale; a reservation decrements it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.value_objects import VariantKey


@dataclass
class InventoryCell:
    """Invariant: ``quantity`` is never negative once a transaction commits."""

    key: VariantKey
    quantity: int = 0
    id: int | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def reserve(self, quantity: int) -> None:
        """Take *quantity* units out of stock for an order line."""
        if quantity <= 0:
            raise ValidationError("Reservation quantity must be positive")
        if quantity > self.quantity:
            raise InsufficientStockError(
                self.key.product_id,
                self.key.color_id,
                self.key.size_id,
                available=self.quantity,
                requested=quantity,
            )
        self.quantity -= quantity
        self._touch()

    def release(self, quantity: int) -> None:
        """Put *quantity* units back (e.g. a cancelled, unshipped order)."""
        if quantity <= 0:
            raise ValidationError("Release quantity must be positive")
        self.quantity += quantity
        self._touch()

    def adjust(self, quantity: int) -> None:
        """Overwrite the stock level (administrative restock)."""
        if quantity < 0:
            raise ValidationError("Inventory quantity cannot be negative")
        self.quantity = quantity
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
