"""Tests of the SQLAlchemy unit of work against a SQLite file."""

import pytest

from storefront.application.place_order import PlaceOrderHandler
from storefront.application.set_inventory import SetInventoryHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import ConflictError, InsufficientStockError
from storefront.domain.model.customer import User


class TestTransactionScope:

    def test_commit_persists(self, uow_factory):
        with uow_factory() as uow:
            uow.users.add(User.create("Alice", "alice@example.com"))
            uow.commit()

        with uow_factory() as uow:
            assert uow.users.get_by_email("alice@example.com") is not None

    def test_leaving_without_commit_rolls_back(self, uow_factory):
        with uow_factory() as uow:
            uow.users.add(User.create("Alice", "alice@example.com"))

        with uow_factory() as uow:
            assert uow.users.get_by_email("alice@example.com") is None

    def test_exception_rolls_back(self, uow_factory):
        with pytest.raises(RuntimeError):
            with uow_factory() as uow:
                uow.users.add(User.create("Alice", "alice@example.com"))
                raise RuntimeError("boom")

        with uow_factory() as uow:
            assert uow.users.get_by_email("alice@example.com") is None

    def test_unique_violation_is_conflict(self, uow_factory):
        with pytest.raises(ConflictError):
            with uow_factory() as uow:
                uow.users.add(User.create("Alice", "alice@example.com"))
                uow.users.add(User.create("Alice 2", "alice@example.com"))

    def test_savepoint_undoes_only_its_block(self, uow_factory):
        with uow_factory() as uow:
            uow.users.add(User.create("Alice", "alice@example.com"))
            with pytest.raises(ConflictError):
                with uow.savepoint():
                    uow.users.add(User.create("Bob", "bob@example.com"))
                    uow.users.add(User.create("Bob 2", "bob@example.com"))
            uow.commit()

        with uow_factory() as uow:
            assert uow.users.get_by_email("alice@example.com") is not None
            assert uow.users.get_by_email("bob@example.com") is None


class TestCheckoutRollback:

    def test_short_second_line_leaves_everything_untouched(self, uow_factory, seed):
        shopper = seed.shopper()
        plenty = seed.variant(stock=5)
        scarce = seed.variant(stock=1)
        seed.add_to_cart(shopper, plenty, 2)
        seed.add_to_cart(shopper, scarce, 1)

        SetInventoryHandler(uow_factory).handle(
            scarce.product_id, scarce.color_id, scarce.size_id, 0
        )

        with pytest.raises(InsufficientStockError):
            PlaceOrderHandler(uow_factory).handle(shopper.user_id, shopper.address_id, "card")

        assert seed.stock(plenty) == 5
        assert seed.stock(scarce) == 0
        with uow_factory() as uow:
            assert len(uow.cart.list_for_user(shopper.user_id)) == 2
            assert uow.orders.list_all() == []

    def test_successful_checkout_persists_lines(self, uow_factory, seed):
        shopper = seed.shopper()
        key = seed.variant(price="100", discount="10", stock=5)
        seed.add_to_cart(shopper, key, 2)

        result = PlaceOrderHandler(uow_factory).handle(
            shopper.user_id, shopper.address_id, "card"
        )

        assert result.total_amount == "$180.00"
        assert seed.stock(key) == 3
        with uow_factory() as uow:
            order = uow.orders.get_by_id(result.order_id)
            assert uow.cart.list_for_user(shopper.user_id) == []
        assert [(line.key, line.quantity.value, str(line.unit_price)) for line in order.lines] == [
            (key, 2, "$90.00")
        ]


class TestCancellationMarker:

    def test_released_stock_is_remembered_across_transactions(self, uow_factory, seed):
        shopper = seed.shopper()
        key = seed.variant(stock=5)
        seed.add_to_cart(shopper, key, 2)
        order_id = PlaceOrderHandler(uow_factory).handle(
            shopper.user_id, shopper.address_id, "card"
        ).order_id
        handler = UpdateOrderStatusHandler(uow_factory, enforce_transitions=False)

        handler.handle(order_id, order_status="cancelled")
        with uow_factory() as uow:
            assert uow.orders.get_by_id(order_id).stock_released is True
        handler.handle(order_id, order_status="processing")
        handler.handle(order_id, order_status="cancelled")

        assert seed.stock(key) == 5
