"""Database session configuration."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from park_locator.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import park_locator.models  # noqa: E402,F401


def configure_sqlite(engine: Engine) -> Engine:
    """Make SQLite serialize write transactions.

    pysqlite defers BEGIN until the first write, so two voters can both read
    the park row and then race on the upgrade. Transactions opened with the
    ``sqlite_immediate`` execution option (see :func:`unit_of_work`) emit
    ``BEGIN IMMEDIATE``, taking the write lock up front and letting the busy
    timeout queue contenders. Every other transaction is a plain deferred
    ``BEGIN`` so reads never wait on the write lock.
    Foreign keys are off by default in SQLite and are needed for cascades.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn: Any) -> None:
        if conn.get_execution_options().get("sqlite_immediate"):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")

    return engine


def build_engine(url: str, **kwargs: Any) -> Engine:
    """Create an engine for ``url`` with backend-specific transaction setup."""
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        connect_args.setdefault("timeout", settings.sqlite_busy_timeout)
        return configure_sqlite(create_engine(url, connect_args=connect_args, **kwargs))
    return create_engine(url, pool_pre_ping=True, **kwargs)


engine = build_engine(settings.effective_database_url, echo=settings.sql_debug)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """Commit everything done inside the block, or roll all of it back.

    When the session has no transaction yet, the block opens one as a write
    transaction, which on SQLite takes the database write lock immediately.
    """
    if not db.in_transaction():
        db.connection(execution_options={"sqlite_immediate": True})
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def create_tables(bind: Engine | None = None) -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=bind or engine)
