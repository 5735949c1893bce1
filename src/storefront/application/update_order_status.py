"""Application service: Update Order Status use case.

Both status fields move through closed transition tables. Cancelling an
order that has not shipped yet puts its quantities back into inventory in
the same transaction as the status change, and marks the order so the
quantities are returned at most once. Reopening such an order (possible
only with transition enforcement off) reserves them again.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus, PaymentStatus
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self, uow_factory: UnitOfWorkFactory, enforce_transitions: bool = True
    ) -> None:
        self._uow_factory = uow_factory
        self._enforce_transitions = enforce_transitions

    def handle(
        self,
        order_id: int,
        order_status: str | None = None,
        payment_status: str | None = None,
    ) -> bool:
        """Apply the requested status change; returns False for a no-op."""
        new_order_status = OrderStatus.parse(order_status) if order_status else None
        new_payment_status = PaymentStatus.parse(payment_status) if payment_status else None

        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id, for_update=True)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            previous = order.order_status
            changed = order.update_status(
                order_status=new_order_status,
                payment_status=new_payment_status,
                enforce_transitions=self._enforce_transitions,
            )
            if not changed:
                return False

            ledger = InventoryLedger(uow.inventory)
            if (
                previous is OrderStatus.PROCESSING
                and order.order_status is OrderStatus.CANCELLED
                and not order.stock_released
            ):
                for line in order.lines:
                    ledger.release(line.key, line.quantity.value)
                order.stock_released = True
            elif (
                previous is OrderStatus.CANCELLED
                and order.order_status is not OrderStatus.CANCELLED
                and order.stock_released
            ):
                # Reopened in lax mode: take the released quantities back.
                for line in order.lines:
                    ledger.reserve(line.key, line.quantity.value)
                order.stock_released = False

            uow.orders.save_status(order)
            uow.commit()

        logger.info(
            "Order %s is now %s / payment %s",
            order_id,
            order.order_status.value,
            order.payment_status.value,
        )
        return True
