"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions: handlers receive a
unit-of-work factory and never see an engine or a session.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.database import (
    create_schema,
    create_session_factory,
    create_store_engine,
)
from storefront.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


def build_uow_factory(settings: Settings | None = None) -> UnitOfWorkFactory:
    """Create the store for *settings* and return a unit-of-work factory."""
    engine = create_store_engine(settings)
    create_schema(engine)
    session_factory = create_session_factory(engine)
    return lambda: SqlAlchemyUnitOfWork(session_factory)


@lru_cache
def _default_session_factory() -> sessionmaker[Session]:
    engine = create_store_engine(get_settings())
    create_schema(engine)
    return create_session_factory(engine)


def unit_of_work() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(_default_session_factory())


def enforce_status_transitions() -> bool:
    return get_settings().ENFORCE_STATUS_TRANSITIONS
