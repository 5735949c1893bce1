"""Order aggregate: the immutable result of a checkout.

An Order owns a fixed snapshot of OrderLines whose unit prices are frozen
at placement. After creation only the two status fields may change, and
only through ``update_status``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, VariantKey


class OrderStatus(Enum):
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(value: str) -> OrderStatus:
        try:
            return OrderStatus(value.strip().lower())
        except (ValueError, AttributeError):
            raise ValidationError(f"Invalid order status: {value!r}") from None


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"

    @staticmethod
    def parse(value: str) -> PaymentStatus:
        try:
            return PaymentStatus(value.strip().lower())
        except (ValueError, AttributeError):
            raise ValidationError(f"Invalid payment status: {value!r}") from None


# ---------------------------------------------------------------------------
# Allowed forward transitions. A status missing from the table is terminal.
# ---------------------------------------------------------------------------
ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
}

PAYMENT_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset({PaymentStatus.PAID, PaymentStatus.FAILED}),
    PaymentStatus.PAID: frozenset({PaymentStatus.REFUNDED}),
}


@dataclass(frozen=True)
class OrderLine:
    """One purchased variant with its unit price locked at placement."""

    key: VariantKey
    quantity: Quantity
    unit_price: Money
    id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. The repository rebuilds persisted orders
    through ``__init__`` without re-validating.
    """

    id: int | None
    user_id: int
    address_id: int
    payment_method: str
    lines: list[OrderLine]
    total_amount: Money
    payment_status: PaymentStatus = PaymentStatus.PENDING
    order_status: OrderStatus = OrderStatus.PROCESSING
    stock_released: bool = False  # quantities are back in inventory
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        user_id: int,
        address_id: int,
        payment_method: str,
        lines: list[OrderLine],
    ) -> Order:
        """Create a new order; the total is always computed server side."""
        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")
        if not lines:
            raise ValidationError("Order must contain at least one line")

        total = Money.zero()
        for line in lines:
            total = total + line.line_total

        return Order(
            id=None,
            user_id=user_id,
            address_id=address_id,
            payment_method=payment_method.strip(),
            lines=list(lines),
            total_amount=total,
        )

    # --- State transitions ----------------------------------------------------

    def update_status(
        self,
        order_status: OrderStatus | None = None,
        payment_status: PaymentStatus | None = None,
        enforce_transitions: bool = True,
    ) -> bool:
        """Move either status dimension forward.

        Both targets are validated before either is applied. Setting a
        status to its current value is a no-op. With
        ``enforce_transitions=False`` any member of the vocabulary is
        accepted.

        Returns True if anything changed.
        """
        if order_status is None and payment_status is None:
            raise ValidationError("Order status or payment status must be provided")

        if enforce_transitions:
            if order_status is not None:
                _check_transition(self.order_status, order_status, ORDER_TRANSITIONS)
            if payment_status is not None:
                _check_transition(self.payment_status, payment_status, PAYMENT_TRANSITIONS)

        changed = False
        if order_status is not None and order_status != self.order_status:
            self.order_status = order_status
            changed = True
        if payment_status is not None and payment_status != self.payment_status:
            self.payment_status = payment_status
            changed = True
        if changed:
            self.updated_at = datetime.now(timezone.utc)
        return changed

    # --- Computed properties --------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.order_status not in ORDER_TRANSITIONS

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self.lines)


def _check_transition(current: Enum, target: Enum, table: dict) -> None:
    if target == current:
        return
    if target not in table.get(current, frozenset()):
        raise ValidationError(
            f"Cannot move from {current.value} to {target.value}"
        )
