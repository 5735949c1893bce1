"""Fixtures backed by a real SQLite database file per test."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.add_product_variant import (
    AddProductColorHandler,
    AddProductSizeHandler,
)
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.add_user import AddUserHandler
from storefront.application.create_address import CreateAddressHandler
from storefront.application.set_inventory import SetInventoryHandler
from storefront.domain.model.value_objects import VariantKey
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.infrastructure.bootstrap import build_uow_factory
from storefront.infrastructure.config import Settings
from tests.fakes import make_fields


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path}/store.db", DB_LOCK_TIMEOUT=30.0)


@pytest.fixture
def uow_factory(settings) -> UnitOfWorkFactory:
    return build_uow_factory(settings)


@dataclass
class Shopper:
    user_id: int
    address_id: int


class Seeder:
    """Drives the real handlers to put rows in the store."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self.uow_factory = uow_factory

    def shopper(self, name: str = "Alice") -> Shopper:
        user_id = AddUserHandler(self.uow_factory).handle(name, f"{name.lower()}@example.com")
        address = CreateAddressHandler(self.uow_factory).handle(user_id, make_fields(name=name))
        return Shopper(user_id, address.id)

    def variant(self, price: str = "25.00", discount: str = "0", stock: int = 5) -> VariantKey:
        product_id = AddProductHandler(self.uow_factory).handle(
            "Shirt", price, discount_percentage=discount
        )
        color_id = AddProductColorHandler(self.uow_factory).handle(product_id, "Red", "#ff0000")
        size_id = AddProductSizeHandler(self.uow_factory).handle(product_id, "M")
        SetInventoryHandler(self.uow_factory).handle(product_id, color_id, size_id, stock)
        return VariantKey(product_id, color_id, size_id)

    def add_to_cart(self, shopper: Shopper, key: VariantKey, quantity: int) -> int:
        return AddToCartHandler(self.uow_factory).handle(
            shopper.user_id, key.product_id, key.color_id, key.size_id, quantity
        )

    def stock(self, key: VariantKey) -> int | None:
        with self.uow_factory() as uow:
            cell = uow.inventory.get(key)
        return cell.quantity if cell is not None else None


@pytest.fixture
def seed(uow_factory) -> Seeder:
    return Seeder(uow_factory)
