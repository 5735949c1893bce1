"""Integration tests for the cart use cases."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.remove_from_cart import ClearCartHandler, RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from tests.fakes import FakeStore


def _setup(stock: int = 5, price: str = "25.00", discount: str = "0"):
    store = FakeStore()
    user_id = store.add_user()
    key = store.add_variant(store.add_product(price=price, discount=discount), stock=stock)
    return store, user_id, key


def _add(store, user_id, key, qty) -> int:
    return AddToCartHandler(store.unit_of_work).handle(
        user_id, key.product_id, key.color_id, key.size_id, qty
    )


class TestAddToCart:

    def test_inserts_line(self):
        store, user_id, key = _setup()
        line_id = _add(store, user_id, key, 2)
        line = store.state.cart[line_id]
        assert line.key == key
        assert line.quantity.value == 2

    def test_same_variant_replaces_quantity(self):
        store, user_id, key = _setup()
        first = _add(store, user_id, key, 2)
        second = _add(store, user_id, key, 4)
        assert first == second
        assert len(store.state.cart) == 1
        assert store.state.cart[first].quantity.value == 4

    def test_user_row_locked_before_the_lookup(self):
        store, user_id, key = _setup()
        _add(store, user_id, key, 1)
        assert store.locked_users == [user_id]

    def test_unknown_user_not_found(self):
        store, _, key = _setup()
        with pytest.raises(EntityNotFoundError, match="User #99"):
            _add(store, 99, key, 1)
        assert store.state.cart == {}

    def test_more_than_in_stock_rejected(self):
        store, user_id, key = _setup(stock=1)
        with pytest.raises(InsufficientStockError) as info:
            _add(store, user_id, key, 2)
        assert info.value.available == 1
        assert store.state.cart == {}

    def test_adding_does_not_touch_inventory(self):
        store, user_id, key = _setup(stock=5)
        _add(store, user_id, key, 5)
        assert store.stock(key) == 5

    def test_zero_quantity_rejected(self):
        store, user_id, key = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            _add(store, user_id, key, 0)

    def test_size_of_other_product_rejected(self):
        store, user_id, key = _setup()
        other = store.add_variant(store.add_product("Other"), stock=5)
        with pytest.raises(EntityNotFoundError, match="Size"):
            AddToCartHandler(store.unit_of_work).handle(
                user_id, key.product_id, key.color_id, other.size_id, 1
            )


class TestUpdateAndRemove:

    def test_update_quantity(self):
        store, user_id, key = _setup()
        line_id = _add(store, user_id, key, 1)
        UpdateCartItemHandler(store.unit_of_work).handle(user_id, line_id, 3)
        assert store.state.cart[line_id].quantity.value == 3

    def test_update_checks_stock(self):
        store, user_id, key = _setup(stock=2)
        line_id = _add(store, user_id, key, 1)
        with pytest.raises(InsufficientStockError):
            UpdateCartItemHandler(store.unit_of_work).handle(user_id, line_id, 3)
        assert store.state.cart[line_id].quantity.value == 1

    def test_update_other_users_line_not_found(self):
        store, user_id, key = _setup()
        line_id = _add(store, user_id, key, 1)
        with pytest.raises(EntityNotFoundError, match="Cart item"):
            UpdateCartItemHandler(store.unit_of_work).handle(user_id + 1, line_id, 2)

    def test_remove(self):
        store, user_id, key = _setup()
        line_id = _add(store, user_id, key, 1)
        RemoveFromCartHandler(store.unit_of_work).handle(user_id, line_id)
        assert store.state.cart == {}

    def test_remove_missing_not_found(self):
        store, user_id, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            RemoveFromCartHandler(store.unit_of_work).handle(user_id, 1)

    def test_clear_only_touches_own_cart(self):
        store, user_id, key = _setup()
        other_user = store.add_user("Bob")
        _add(store, user_id, key, 1)
        kept = _add(store, other_user, key, 1)

        assert ClearCartHandler(store.unit_of_work).handle(user_id) == 1
        assert list(store.state.cart) == [kept]


class TestShowCart:

    def test_totals_formatted(self):
        store = FakeStore()
        user_id = store.add_user()
        p = store.add_variant(store.add_product("P", "100", "10"), stock=5)
        q = store.add_variant(store.add_product("Q", "50"), stock=5)
        _add(store, user_id, p, 2)
        _add(store, user_id, q, 1)

        cart = ShowCartHandler(store.unit_of_work).handle(user_id)

        assert cart.summary.total_items == 3
        assert cart.summary.sub_total == "$230.00"
        assert cart.summary.shipping_cost == "$0.00"
        assert cart.summary.tax == "$23.00"
        assert cart.summary.total == "$253.00"
        assert [item.product_name for item in cart.items] == ["Q", "P"]
        assert cart.items[1].discount_percentage == "10%"
        assert cart.items[1].final_price == "$90.00"
        assert cart.items[1].sub_total == "$180.00"

    def test_stock_level_shown(self):
        store, user_id, key = _setup(stock=3)
        _add(store, user_id, key, 2)
        store.set_stock(key, 1)

        item = ShowCartHandler(store.unit_of_work).handle(user_id).items[0]

        assert item.in_stock == 1
        assert item.quantity == 2

    def test_reading_twice_gives_the_same_cart(self):
        store, user_id, key = _setup()
        _add(store, user_id, key, 2)
        handler = ShowCartHandler(store.unit_of_work)
        assert handler.handle(user_id) == handler.handle(user_id)
        assert store.commits == 1
