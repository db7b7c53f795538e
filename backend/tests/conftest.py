"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Environment is set before any club_api import (Settings is lru_cached)
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - All sessions share one connection (StaticPool) so seeded rows are visible to requests

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL row locks are not exercised here; SQLite ignores FOR UPDATE)
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import uuid  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import club_api.models  # noqa: E402,F401
from club_api.db.base import Base  # noqa: E402
from club_api.infrastructure.data_access import DataAccess  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def data(test_session_factory):
    """DataAccess over its own session, for seeding and asserting store state."""
    async with test_session_factory() as session:
        yield DataAccess(session)


@pytest.fixture
def future_date():
    def _make(days: int = 30) -> str:
        return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()
    return _make


@pytest.fixture
def make_user(data):
    """Insert a user row directly; returns the stored row."""
    async def _make(**overrides) -> dict:
        record = {
            "email": f"member-{uuid.uuid4().hex[:8]}@univ-club.org",
            "password_hash": "not-a-real-hash",
            "first_name": "Amira",
            "last_name": "Haddad",
            "role": "member",
            "is_active": True,
        }
        record.update(overrides)
        return await data.insert("users", record)
    return _make
