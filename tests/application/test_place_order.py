"""Integration tests for the PlaceOrder (checkout) use case.

Every failure case asserts that inventory, the cart and the orders table
are exactly as they were before the attempt.
"""

import copy

import pytest

from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientStockError,
    InvalidAddressError,
    TransactionFailure,
    ValidationError,
)
from storefront.domain.model.cart import CartLine
from storefront.domain.model.customer import Address
from storefront.domain.model.order import OrderStatus, PaymentStatus
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeStore, make_fields


def _setup():
    """User with one address and two stocked products in the cart.

    P: 100 with 10% off, qty 2 (stock 5). Q: 50, qty 1 (stock 3).
    """
    store = FakeStore()
    user_id = store.add_user()
    address_id = store.state.next_id("addresses")
    store.state.addresses[address_id] = Address(
        address_id, user_id, make_fields(), is_default=True
    )
    p = store.add_variant(store.add_product("P", "100", "10"), stock=5)
    q = store.add_variant(store.add_product("Q", "50"), stock=3)
    for key, qty in ((p, 2), (q, 1)):
        line_id = store.state.next_id("cart")
        store.state.cart[line_id] = CartLine(line_id, user_id, key, Quantity(qty))
    return store, user_id, address_id, p, q


def _assert_unchanged(store: FakeStore, before) -> None:
    assert store.state.inventory == before.inventory
    assert store.state.cart == before.cart
    assert store.state.orders == before.orders


class TestPlaceOrderHappyPath:

    def test_creates_order_with_server_side_total(self):
        store, user_id, address_id, _, _ = _setup()

        result = PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        assert result.total_amount == "$230.00"
        order = store.state.orders[result.order_id]
        assert order.total_amount == Money.of("230")
        assert order.order_status is OrderStatus.PROCESSING
        assert order.payment_status is PaymentStatus.PENDING
        assert order.payment_method == "card"

    def test_user_row_locked_first(self):
        store, user_id, address_id, _, _ = _setup()
        store.fail_on.add("users.lock")
        before = copy.deepcopy(store.state)

        with pytest.raises(TransactionFailure):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")
        _assert_unchanged(store, before)

        store.fail_on.clear()
        PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")
        assert store.locked_users == [user_id]

    def test_lines_snapshot_final_price(self):
        store, user_id, address_id, p, q = _setup()

        result = PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        lines = store.state.orders[result.order_id].lines
        assert [(line.key, line.quantity.value, line.unit_price) for line in lines] == [
            (p, 2, Money.of("90")),
            (q, 1, Money.of("50")),
        ]
        assert all(line.id is not None for line in lines)

    def test_decrements_inventory_and_clears_cart(self):
        store, user_id, address_id, p, q = _setup()

        PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        assert store.stock(p) == 3
        assert store.stock(q) == 2
        assert store.state.cart == {}

    def test_other_users_cart_untouched(self):
        store, user_id, address_id, p, _ = _setup()
        other = store.add_user("Bob")
        store.state.cart[99] = CartLine(99, other, p, Quantity(1))

        PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        assert list(store.state.cart) == [99]

    def test_exact_stock_leaves_zero(self):
        store, user_id, address_id, p, q = _setup()
        store.set_stock(p, 2)
        store.set_stock(q, 1)

        PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        assert store.stock(p) == 0
        assert store.stock(q) == 0


class TestPlaceOrderValidation:

    def test_missing_address_id(self):
        store, user_id, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="Address ID is required"):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, 0, "card")

    def test_blank_payment_method(self):
        store, user_id, address_id, _, _ = _setup()
        with pytest.raises(ValidationError, match="Payment method is required"):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, " ")

    def test_address_of_another_user(self):
        store, user_id, address_id, _, _ = _setup()
        other = store.add_user("Bob")
        before = copy.deepcopy(store.state)
        with pytest.raises(InvalidAddressError):
            PlaceOrderHandler(store.unit_of_work).handle(other, address_id, "card")
        _assert_unchanged(store, before)

    def test_empty_cart(self):
        store, user_id, address_id, _, _ = _setup()
        store.state.cart.clear()
        with pytest.raises(EmptyCartError, match="Cart is empty"):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")
        assert store.state.orders == {}


class TestPlaceOrderAtomicity:

    def test_second_line_short_rolls_back_first_reservation(self):
        store, user_id, address_id, p, q = _setup()
        store.set_stock(q, 0)
        before = copy.deepcopy(store.state)

        with pytest.raises(InsufficientStockError) as info:
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        assert (info.value.product_id, info.value.available, info.value.requested) == (
            q.product_id, 0, 1
        )
        _assert_unchanged(store, before)
        assert store.stock(p) == 5

    def test_missing_inventory_cell_fails(self):
        store, user_id, address_id, _, q = _setup()
        del store.state.inventory[q]
        before = copy.deepcopy(store.state)

        with pytest.raises(InsufficientStockError):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")
        _assert_unchanged(store, before)

    @pytest.mark.parametrize("operation", ["orders.add", "cart.clear", "commit"])
    def test_store_failure_rolls_everything_back(self, operation):
        store, user_id, address_id, _, _ = _setup()
        before = copy.deepcopy(store.state)
        store.fail_on.add(operation)

        with pytest.raises(TransactionFailure):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")
        _assert_unchanged(store, before)

    def test_deleted_product_in_cart(self):
        store, user_id, address_id, p, _ = _setup()
        del store.state.products[p.product_id]
        before = copy.deepcopy(store.state)

        with pytest.raises(EntityNotFoundError):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")
        _assert_unchanged(store, before)

    def test_retry_after_restock_succeeds(self):
        store, user_id, address_id, _, q = _setup()
        store.set_stock(q, 0)
        with pytest.raises(InsufficientStockError):
            PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        store.set_stock(q, 1)
        result = PlaceOrderHandler(store.unit_of_work).handle(user_id, address_id, "card")

        assert result.order_id in store.state.orders
