"""Cart lines and the materialized cart view.

A CartLine stores only identity and quantity. Prices are never stored on
the cart: every view is recomputed from the current product rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from storefront.domain.model.value_objects import Money, Quantity, VariantKey

# ---------------------------------------------------------------------------
# Pricing policy
# ---------------------------------------------------------------------------
TAX_RATE = Decimal("0.10")
SHIPPING_COST = Money.zero()


@dataclass
class CartLine:
    """One variant in a user's cart, unique per (user, variant)."""

    id: int | None
    user_id: int
    key: VariantKey
    quantity: Quantity
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def change_quantity(self, quantity: Quantity) -> None:
        self.quantity = quantity
        self.updated_at = datetime.now(timezone.utc)


@dataclass(frozen=True)
class CartLineView:
    """A cart line joined with the live product price and stock level."""

    line_id: int
    key: VariantKey
    product_name: str
    quantity: int
    base_price: Money
    discount_percentage: Decimal
    final_price: Money
    in_stock: int

    @property
    def sub_total(self) -> Money:
        return self.final_price * self.quantity

    @property
    def is_available(self) -> bool:
        return self.in_stock >= self.quantity


@dataclass(frozen=True)
class CartTotals:
    total_items: int
    subtotal: Money
    shipping_cost: Money
    tax: Money
    total: Money

    @staticmethod
    def compute(lines: list[CartLineView]) -> CartTotals:
        subtotal = Money.zero()
        total_items = 0
        for line in lines:
            subtotal = subtotal + line.sub_total
            total_items += line.quantity
        tax = subtotal * TAX_RATE
        return CartTotals(
            total_items=total_items,
            subtotal=subtotal,
            shipping_cost=SHIPPING_COST,
            tax=tax,
            total=subtotal + SHIPPING_COST + tax,
        )


@dataclass(frozen=True)
class CartView:
    lines: list[CartLineView]
    totals: CartTotals

    @property
    def is_empty(self) -> bool:
        return not self.lines
