"""Application service: Place Order use case (cart to order checkout).

The whole conversion is one unit of work:

1. Lock the user row, then check the address belongs to the user.
2. Re-read the cart lines in ascending line id.
3. Reserve each line's inventory cell under its row lock and snapshot
   the product's current final price into an order line.
4. Persist the order with its lines.
5. Empty the cart.

Any failure (short stock, a missing product, a store error) leaves the
``with`` block without a commit, so inventory, the cart and the orders
table all stay exactly as they were. Lines are visited in ascending id so
two concurrent checkouts lock shared cells in the same order.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CheckoutResult
from storefront.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InvalidAddressError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLine
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int, address_id: int, payment_method: str) -> CheckoutResult:
        if not address_id or address_id <= 0:
            raise ValidationError("Address ID is required")
        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")

        try:
            with self._uow_factory() as uow:
                uow.users.lock(user_id)
                if uow.addresses.get(user_id, address_id) is None:
                    raise InvalidAddressError("Invalid address")

                cart_lines = sorted(uow.cart.list_for_user(user_id), key=lambda line: line.id)
                if not cart_lines:
                    raise EmptyCartError("Cart is empty")

                ledger = InventoryLedger(uow.inventory)
                order_lines: list[OrderLine] = []
                for line in cart_lines:
                    product = uow.products.get_by_id(line.key.product_id)
                    if product is None:
                        raise EntityNotFoundError(
                            f"Product #{line.key.product_id} not found"
                        )
                    ledger.reserve(line.key, line.quantity.value)
                    order_lines.append(
                        OrderLine(
                            key=line.key,
                            quantity=line.quantity,
                            unit_price=product.final_price,  # <-- price snapshot
                        )
                    )

                order = Order.place(
                    user_id=user_id,
                    address_id=address_id,
                    payment_method=payment_method,
                    lines=order_lines,
                )
                uow.orders.add(order)
                uow.cart.clear(user_id)
                uow.commit()
        except ValidationError as exc:
            logger.warning("Checkout rejected for user %s: %s", user_id, exc)
            raise

        logger.info(
            "Placed order %s for user %s: %d lines, total %s",
            order.id,
            user_id,
            len(order.lines),
            order.total_amount,
        )
        return CheckoutResult(order_id=order.id, total_amount=str(order.total_amount))  # type: ignore[arg-type]
