"""Engine and session factory for the ledger store.

SQLite needs two adjustments to behave like the server databases the
engine is written against:

* foreign keys are off by default, so every connection turns them on;
* pysqlite defers BEGIN until the first write, which lets two
  transactions read the same inventory cell before either writes. The
  driver's own transaction handling is disabled and every transaction is
  opened with ``BEGIN IMMEDIATE``, taking the database write lock up
  front. Writers queue for up to ``DB_LOCK_TIMEOUT`` seconds.

On PostgreSQL the repositories use ``SELECT ... FOR UPDATE`` instead.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.tables import Base


def create_store_engine(settings: Settings | None = None) -> Engine:
    settings = settings or get_settings()

    if settings.is_sqlite:
        url = make_url(settings.DATABASE_URL)
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"timeout": settings.DB_LOCK_TIMEOUT, "check_same_thread": False},
        )
        _install_sqlite_hooks(engine)
        return engine

    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


def _install_sqlite_hooks(engine: Engine) -> None:

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


def create_schema(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(engine)
