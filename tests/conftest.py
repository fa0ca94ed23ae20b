# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from park_locator.core.security import Caller, create_access_token
from park_locator.db.session import build_engine, create_tables, drop_tables
from park_locator.db.session import get_db as app_get_session
from park_locator.main import app as fastapi_app
from park_locator.models import Park, ParkStatus
from park_locator.services.ledger import VoteLedger

TEST_DB_URL = "sqlite://"

OWNER_ID = "user-owner"
OTHER_ID = "user-other"
ADMIN_ID = "user-admin"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = build_engine(TEST_DB_URL, poolclass=StaticPool)
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def owner() -> Caller:
    return Caller(user_id=OWNER_ID)


@pytest.fixture()
def other() -> Caller:
    return Caller(user_id=OTHER_ID)


@pytest.fixture()
def admin() -> Caller:
    return Caller(user_id=ADMIN_ID, is_admin=True)


@pytest.fixture()
def anonymous() -> Caller:
    return Caller.anonymous()


def _bearer(subject: str, *, is_admin: bool = False) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(subject, is_admin=is_admin)}"}


@pytest.fixture()
def owner_headers() -> dict[str, str]:
    """Return authorization headers for the park owner."""
    return _bearer(OWNER_ID)


@pytest.fixture()
def other_headers() -> dict[str, str]:
    """Return authorization headers for an unrelated signed-in user."""
    return _bearer(OTHER_ID)


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    """Return authorization headers for an admin."""
    return _bearer(ADMIN_ID, is_admin=True)


@pytest.fixture()
def voter_headers() -> Callable[[str], dict[str, str]]:
    """Return a factory producing headers for arbitrary voter identities."""
    return _bearer


@pytest.fixture()
def ledger() -> VoteLedger:
    return VoteLedger()


@pytest.fixture()
def make_park(db_session: Session) -> Callable[..., Park]:
    """Persist a park directly, bypassing the service layer."""

    def _make(
        created_by: str = OWNER_ID,
        status: ParkStatus = ParkStatus.PENDING,
        upvotes: int = 0,
        downvotes: int = 0,
        name: str = "Riverside Bars",
    ) -> Park:
        park = Park(
            name=name,
            description="Pull-up and dip bars by the river",
            latitude=52.52,
            longitude=13.405,
            address="1 River Walk",
            created_by=created_by,
            status=status,
            upvotes=upvotes,
            downvotes=downvotes,
        )
        db_session.add(park)
        db_session.commit()
        return park

    return _make


@pytest.fixture()
def pending_park(make_park: Callable[..., Park]) -> Park:
    """Create a baseline pending park owned by the owner fixture."""
    return make_park()


@pytest.fixture()
def approved_park(make_park: Callable[..., Park]) -> Park:
    return make_park(status=ParkStatus.APPROVED, name="Approved Park")
