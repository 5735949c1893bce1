"""Integration tests for the inventory use cases."""

import pytest

from storefront.application.reserve_inventory import ReserveInventoryHandler
from storefront.application.set_inventory import SetInventoryHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    TransactionFailure,
    ValidationError,
)
from tests.fakes import FakeStore


def _setup(stock: int | None = None):
    store = FakeStore()
    key = store.add_variant(store.add_product(), stock=stock)
    return store, key


class TestSetInventory:

    def test_creates_cell_lazily(self):
        store, key = _setup()
        level = SetInventoryHandler(store.unit_of_work).handle(
            key.product_id, key.color_id, key.size_id, 12
        )
        assert level == 12
        assert store.stock(key) == 12

    def test_overwrites(self):
        store, key = _setup(stock=3)
        SetInventoryHandler(store.unit_of_work).handle(*_ids(key), 0)
        assert store.stock(key) == 0

    def test_negative_rejected(self):
        store, key = _setup(stock=3)
        with pytest.raises(ValidationError, match="cannot be negative"):
            SetInventoryHandler(store.unit_of_work).handle(*_ids(key), -1)
        assert store.stock(key) == 3

    def test_color_of_another_product_rejected(self):
        store, key = _setup()
        other = store.add_variant(store.add_product("Other"))
        with pytest.raises(EntityNotFoundError, match=f"Color #{other.color_id}"):
            SetInventoryHandler(store.unit_of_work).handle(
                key.product_id, other.color_id, key.size_id, 5
            )

    def test_unknown_size_rejected(self):
        store, key = _setup()
        with pytest.raises(EntityNotFoundError, match="Size #99"):
            SetInventoryHandler(store.unit_of_work).handle(key.product_id, key.color_id, 99, 5)

    def test_missing_ids_rejected(self):
        store, _ = _setup()
        with pytest.raises(ValidationError, match="required"):
            SetInventoryHandler(store.unit_of_work).handle(1, 0, 1, 5)


class TestReserveInventory:

    def test_returns_remaining(self):
        store, key = _setup(stock=5)
        assert ReserveInventoryHandler(store.unit_of_work).handle(*_ids(key), 2) == 3
        assert store.stock(key) == 3

    def test_insufficient(self):
        store, key = _setup(stock=1)
        with pytest.raises(InsufficientStockError) as info:
            ReserveInventoryHandler(store.unit_of_work).handle(*_ids(key), 2)
        assert info.value.available == 1
        assert store.stock(key) == 1

    def test_write_failure_leaves_stock(self):
        store, key = _setup(stock=5)
        store.fail_on.add("commit")
        with pytest.raises(TransactionFailure):
            ReserveInventoryHandler(store.unit_of_work).handle(*_ids(key), 2)
        assert store.stock(key) == 5


class TestShowInventory:

    def test_lists_cells(self):
        store, key = _setup(stock=4)
        lines = ShowInventoryHandler(store.unit_of_work).handle(key.product_id)
        assert [(line.color_id, line.size_id, line.quantity) for line in lines] == [
            (key.color_id, key.size_id, 4)
        ]

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            ShowInventoryHandler(FakeStore().unit_of_work).handle(1)


def _ids(key):
    return key.product_id, key.color_id, key.size_id
