"""Integration tests for order status updates and order queries."""

import pytest

from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    TransactionFailure,
    ValidationError,
)
from storefront.domain.model.cart import CartLine
from storefront.domain.model.customer import Address
from storefront.domain.model.order import OrderStatus, PaymentStatus
from storefront.domain.model.value_objects import Quantity
from tests.fakes import FakeStore, make_fields


def _place(store: FakeStore, user_id: int, key, qty: int = 2) -> int:
    address_id = store.state.next_id("addresses")
    store.state.addresses[address_id] = Address(address_id, user_id, make_fields())
    line_id = store.state.next_id("cart")
    store.state.cart[line_id] = CartLine(line_id, user_id, key, Quantity(qty))
    return PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card").order_id


def _setup():
    store = FakeStore()
    user_id = store.add_user()
    key = store.add_variant(store.add_product(price="10"), stock=5)
    order_id = _place(store, user_id, key)
    return store, user_id, key, order_id


class TestUpdateOrderStatus:

    def test_ship_then_deliver(self):
        store, _, _, order_id = _setup()
        handler = UpdateOrderStatusHandler(store.unit_of_work)

        assert handler.handle(order_id, order_status="shipped") is True
        assert handler.handle(order_id, order_status="delivered") is True

        assert store.state.orders[order_id].order_status is OrderStatus.DELIVERED

    def test_payment_status(self):
        store, _, _, order_id = _setup()
        UpdateOrderStatusHandler(store.unit_of_work).handle(order_id, payment_status="paid")
        assert store.state.orders[order_id].payment_status is PaymentStatus.PAID

    def test_backward_move_rejected(self):
        store, _, _, order_id = _setup()
        handler = UpdateOrderStatusHandler(store.unit_of_work)
        handler.handle(order_id, order_status="shipped")
        handler.handle(order_id, order_status="delivered")

        with pytest.raises(ValidationError, match="Cannot move from delivered to processing"):
            handler.handle(order_id, order_status="processing")
        assert store.state.orders[order_id].order_status is OrderStatus.DELIVERED

    def test_lax_mode_accepts_backward_move(self):
        store, _, _, order_id = _setup()
        store.state.orders[order_id].order_status = OrderStatus.DELIVERED

        UpdateOrderStatusHandler(store.unit_of_work, enforce_transitions=False).handle(
            order_id, order_status="processing"
        )

        assert store.state.orders[order_id].order_status is OrderStatus.PROCESSING

    def test_lax_mode_reopen_and_cancel_again_restocks_once(self):
        store, _, key, order_id = _setup()
        handler = UpdateOrderStatusHandler(store.unit_of_work, enforce_transitions=False)

        handler.handle(order_id, order_status="cancelled")
        assert store.stock(key) == 5
        handler.handle(order_id, order_status="processing")
        assert store.stock(key) == 3
        handler.handle(order_id, order_status="cancelled")

        assert store.stock(key) == 5
        assert store.state.orders[order_id].stock_released is True

    def test_lax_mode_reopen_without_stock_fails(self):
        store, _, key, order_id = _setup()
        handler = UpdateOrderStatusHandler(store.unit_of_work, enforce_transitions=False)
        handler.handle(order_id, order_status="cancelled")
        store.set_stock(key, 1)

        with pytest.raises(InsufficientStockError):
            handler.handle(order_id, order_status="processing")

        assert store.state.orders[order_id].order_status is OrderStatus.CANCELLED
        assert store.stock(key) == 1

    def test_same_status_is_noop(self):
        store, _, _, order_id = _setup()
        commits = store.commits
        changed = UpdateOrderStatusHandler(store.unit_of_work).handle(
            order_id, order_status="processing"
        )
        assert changed is False
        assert store.commits == commits

    def test_unknown_status_value(self):
        store, _, _, order_id = _setup()
        with pytest.raises(ValidationError, match="Invalid order status"):
            UpdateOrderStatusHandler(store.unit_of_work).handle(order_id, order_status="lost")

    def test_nothing_requested(self):
        store, _, _, order_id = _setup()
        with pytest.raises(ValidationError, match="must be provided"):
            UpdateOrderStatusHandler(store.unit_of_work).handle(order_id)

    def test_unknown_order(self):
        store, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #404"):
            UpdateOrderStatusHandler(store.unit_of_work).handle(404, order_status="shipped")


class TestCancellation:

    def test_cancelling_processing_order_restocks(self):
        store, _, key, order_id = _setup()
        assert store.stock(key) == 3

        UpdateOrderStatusHandler(store.unit_of_work).handle(order_id, order_status="cancelled")

        assert store.stock(key) == 5
        assert store.state.orders[order_id].order_status is OrderStatus.CANCELLED

    def test_cancelling_shipped_order_does_not_restock(self):
        store, _, key, order_id = _setup()
        handler = UpdateOrderStatusHandler(store.unit_of_work)
        handler.handle(order_id, order_status="shipped")

        handler.handle(order_id, order_status="cancelled")

        assert store.stock(key) == 3

    def test_restock_failure_keeps_order_processing(self):
        store, _, key, order_id = _setup()
        store.fail_on.add("inventory.save")

        with pytest.raises(TransactionFailure):
            UpdateOrderStatusHandler(store.unit_of_work).handle(
                order_id, order_status="cancelled"
            )

        assert store.state.orders[order_id].order_status is OrderStatus.PROCESSING
        assert store.stock(key) == 3


class TestOrderQueries:

    def test_show_order(self):
        store, user_id, key, order_id = _setup()
        dto = ShowOrderHandler(store.unit_of_work).handle(order_id)
        assert dto.user_id == user_id
        assert dto.total_amount == "$20.00"
        assert dto.order_status == "processing"
        assert dto.payment_status == "pending"
        assert [(i.product_id, i.quantity, i.price_per_unit) for i in dto.items] == [
            (key.product_id, 2, "$10.00")
        ]

    def test_show_other_users_order_not_found(self):
        store, user_id, _, order_id = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(store.unit_of_work).handle(order_id, user_id=user_id + 1)

    def test_list_newest_first(self):
        store, user_id, key, first = _setup()
        second = _place(store, user_id, key, qty=1)
        other_user = store.add_user("Bob")
        _place(store, other_user, key, qty=1)

        mine = ListOrdersHandler(store.unit_of_work).handle(user_id)

        assert [o.id for o in mine] == [second, first]
        assert len(ListOrdersHandler(store.unit_of_work).handle()) == 3
