"""
Courier Portal API — Test Configuration (conftest.py)
=====================================================

Shared pytest fixtures for the whole suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine: In-memory SQLite engine with every table created
    ├── session_factory: Session maker bound to that engine
    ├── seed: Helper that inserts ORM rows and commits
    ├── mock_db_session: AsyncMock session (asserts the store is not contacted)
    ├── test_client: HTTPX AsyncClient wired to the in-memory database
    └── mock_client: HTTPX AsyncClient wired to mock_db_session
"""

import os

# Settings are read when courier_api is first imported, so the environment
# must be in place before any application import below.
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret-for-the-courier-portal-suite-long-enough-for-hs512-keys"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import courier_api.domain  # noqa: F401  (registers every model on Base.metadata)
from courier_api.db.base import Base, get_db
from courier_api.main import app


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """One in-memory database per test; StaticPool keeps it on a single connection."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def seed(session_factory):
    """
    Insert rows directly, bypassing the API.

    Usage:
        async def test_list(test_client, seed):
            await seed(Office(code="B", name="Branch"))
    """

    async def _seed(*rows):
        async with session_factory() as session:
            session.add_all(rows)
            await session.commit()
        return rows

    return _seed


@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Tests that must prove "the store was not contacted" assert on
    ``execute`` / ``add`` / ``flush`` never being awaited or called.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP clients
# ══════════════════════════════════════════════════════════════════════════

def _client(app_):
    # raise_app_exceptions=False lets unhandled errors surface as the 500
    # response the server would send instead of propagating into the test.
    transport = ASGITransport(app=app_, raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(session_factory):
    """HTTPX AsyncClient talking to the app, backed by the in-memory database."""

    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    async with _client(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def mock_client(mock_db_session):
    """HTTPX AsyncClient whose requests all receive ``mock_db_session``."""

    async def _override_get_db():
        yield mock_db_session

    app.dependency_overrides[get_db] = _override_get_db
    async with _client(app) as client:
        yield client
    app.dependency_overrides.clear()
