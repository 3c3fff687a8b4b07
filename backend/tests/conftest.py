"""
Chirper Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (gateway error paths)
    ├── mock_accounts / mock_messages: AsyncMock gateways (RequestHandler unit tests)
    ├── db_engine: Async SQLite engine on a per-test file with tables created
    ├── db_session: Real AsyncSession bound to db_engine (gateway tests)
    └── test_client: HTTPX AsyncClient against the app, Store swapped to db_engine
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any app imports: app.config builds its singleton
# (and app.database its engine) at import time.
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="chirper_test_"), "app.db")
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base, get_db_session
from app.gateways.account_gateway import AccountGateway
from app.gateways.message_gateway import MessageGateway
from app.models.account import Account
from app.models.message import Message


# ══════════════════════════════════════════════════════════════════════════
# Mocked collaborators
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = SQLAlchemyError("boom")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_accounts():
    """AccountGateway double; every lookup misses unless a test says otherwise."""
    gateway = AsyncMock(spec=AccountGateway)
    gateway.find_by_username.return_value = None
    gateway.find_by_username_and_password.return_value = None
    gateway.find_by_id.return_value = None
    return gateway


@pytest.fixture
def mock_messages():
    """MessageGateway double; empty store unless a test says otherwise."""
    gateway = AsyncMock(spec=MessageGateway)
    gateway.find_by_id.return_value = None
    gateway.find_all.return_value = []
    gateway.find_all_by_posted_by.return_value = []
    gateway.delete_by_id.return_value = None
    gateway.update_text_by_id.return_value = None
    return gateway


@pytest.fixture
def sample_account():
    return Account(account_id=1, username="testuser1", password="password")


@pytest.fixture
def sample_message():
    return Message(
        message_id=1,
        posted_by=1,
        message_text="follow the white rabbit",
        time_posted_epoch=1669947792,
    )


# ══════════════════════════════════════════════════════════════════════════
# Real SQLite Store
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    Async SQLite engine on a fresh file per test, with all tables created.

    Why a file (not :memory:): every session gets its own connection, and
    an in-memory database is private to the connection that opened it.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    The app's get_db_session dependency is overridden with one bound to the
    per-test SQLite engine, committing and rolling back the same way.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
