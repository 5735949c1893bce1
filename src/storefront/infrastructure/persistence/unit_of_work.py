"""SQLAlchemy implementation of the UnitOfWork port.

One unit of work is one session and one transaction. Leaving the ``with``
block without ``commit()`` (early return, domain error, driver error,
timeout) rolls back, and the session is always closed. Driver errors are
translated so no ``sqlalchemy.exc`` type reaches the application layer.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import ConflictError, TransactionFailure
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.logging import get_logger
from storefront.infrastructure.persistence.sql_address_repository import (
    SqlAddressRepository,
)
from storefront.infrastructure.persistence.sql_cart_repository import SqlCartRepository
from storefront.infrastructure.persistence.sql_image_repository import SqlImageRepository
from storefront.infrastructure.persistence.sql_inventory_repository import (
    SqlInventoryRepository,
)
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from storefront.infrastructure.persistence.sql_user_repository import SqlUserRepository

logger = get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None
        self._committed = False

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        if self._session is not None:
            raise RuntimeError("Unit of work is already active")
        session = self._session_factory()
        try:
            session.begin()
            self.users = SqlUserRepository(session)
            self.addresses = SqlAddressRepository(session)
            self.products = SqlProductRepository(session)
            self.images = SqlImageRepository(session)
            self.inventory = SqlInventoryRepository(session)
            self.cart = SqlCartRepository(session)
            self.orders = SqlOrderRepository(session)
        except SQLAlchemyError as exc:
            session.close()
            raise TransactionFailure(f"Could not open a transaction: {exc}") from exc
        self._session = session
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        session = self._session
        self._session = None
        if session is None:
            return
        try:
            if exc_type is not None or not self._committed:
                session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")
        finally:
            session.close()

        if isinstance(exc_val, IntegrityError):
            raise ConflictError(f"Store rejected the write: {exc_val.orig}") from exc_val
        if isinstance(exc_val, SQLAlchemyError):
            raise TransactionFailure(f"Store operation failed: {exc_val}") from exc_val

    def commit(self) -> None:
        session = self._active()
        try:
            session.commit()
        except IntegrityError as exc:
            raise ConflictError(f"Store rejected the commit: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            raise TransactionFailure(f"Commit failed: {exc}") from exc
        self._committed = True

    def rollback(self) -> None:
        self._active().rollback()

    @contextmanager
    def savepoint(self) -> Iterator[None]:
        nested = self._active().begin_nested()
        try:
            yield
        except IntegrityError as exc:
            nested.rollback()
            raise ConflictError(f"Store rejected the write: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            nested.rollback()
            raise TransactionFailure(f"Store operation failed: {exc}") from exc
        except BaseException:
            nested.rollback()
            raise
        else:
            nested.commit()

    def _active(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work is not active")
        return self._session
