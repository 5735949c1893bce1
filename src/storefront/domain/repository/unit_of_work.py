"""Unit of Work port: the transactional boundary for use cases.

The UoW is a domain concept: "these operations must succeed or fail
together." The concrete implementation (SQLAlchemy session) lives in
infrastructure/persistence/unit_of_work.py.

Usage in a handler::

    with self._uow_factory() as uow:
        uow.cart.clear(user_id)
        uow.commit()
    # auto-rollback on exception or when commit() was never called
"""

from __future__ import annotations

import abc
from contextlib import AbstractContextManager
from typing import Callable

from storefront.domain.repository.address_repository import AddressRepository
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.image_repository import ImageRepository
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class UnitOfWork(abc.ABC):
    users: UserRepository
    addresses: AddressRepository
    products: ProductRepository
    images: ImageRepository
    inventory: InventoryRepository
    cart: CartRepository
    orders: OrderRepository

    @abc.abstractmethod
    def __enter__(self) -> UnitOfWork:
        ...

    @abc.abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...

    @abc.abstractmethod
    def commit(self) -> None:
        ...

    @abc.abstractmethod
    def rollback(self) -> None:
        ...

    @abc.abstractmethod
    def savepoint(self) -> AbstractContextManager[None]:
        """Nested scope whose writes are undone alone if it raises."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
