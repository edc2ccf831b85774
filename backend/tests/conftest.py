"""
Pastoral Admin Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Service tests run against AsyncMock repositories; unit-of-work,
       repository and route tests run against an in-memory SQLite database
       (aiosqlite) created from the ORM metadata.

Fixture Hierarchy:
    Mocks:
    ├── mock_session: AsyncMock standing in for AsyncSession
    ├── mock_church_repo / mock_address_repo: AsyncMock repositories whose
    │   transaction() commits or rolls back mock_session
    └── mock_industry_repo / mock_field_of_work_repo

    Database:
    ├── sqlite_engine: in-memory engine, FK enforcement on, tables created
    ├── session_factory: async_sessionmaker bound to sqlite_engine
    └── test_client: HTTPX AsyncClient on an app wired to session_factory
"""

import os

# Set before any pastoral_admin import so Settings() never sees a real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ADMIN_API_KEY"] = ""

import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from pastoral_admin.config import Settings
from pastoral_admin.database import Base, create_session_factory
from pastoral_admin.models import Address, Church

TEST_ADMIN_KEY = "test-admin-key"


# ══════════════════════════════════════════════════════════════════════════
# Builders
# ══════════════════════════════════════════════════════════════════════════


def make_transaction(session):
    """
    Stand-in for BaseRepository.transaction(): yields `session`, commits on
    success, rolls back on any exception and re-raises.
    """

    @asynccontextmanager
    async def transaction():
        try:
            yield session
            await session.commit()
        except BaseException:
            await session.rollback()
            raise

    return transaction


def address_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "street_line_1": "123 Main St",
        "street_line_2": None,
        "city": "Los Angeles",
        "state_province": "CA",
        "postal_code": "90001",
        "country": "USA",
    }
    payload.update(overrides)
    return payload


def church_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "name": "St. Mary's Cathedral",
        "diocese": "Los Angeles",
        "parish_number": None,
        "website_url": None,
        "phone_number": None,
        "address": address_payload(),
        "is_archdiocese": True,
    }
    payload.update(overrides)
    return payload


def make_address(**overrides: Any) -> Address:
    fields = address_payload(id=uuid.uuid4())
    fields.update(overrides)
    return Address(**fields)


def make_church(**overrides: Any) -> Church:
    fields = {
        "id": uuid.uuid4(),
        "name": "St. Mary's Cathedral",
        "diocese": "Los Angeles",
        "parish_number": None,
        "website_url": None,
        "phone_number": None,
        "address_id": uuid.uuid4(),
        "is_archdiocese": True,
        "is_active": True,
    }
    fields.update(overrides)
    return Church(**fields)


# ══════════════════════════════════════════════════════════════════════════
# Mock Fixtures
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_church_repo(mock_session):
    repo = AsyncMock()
    repo.transaction = make_transaction(mock_session)
    return repo


@pytest.fixture
def mock_address_repo(mock_session):
    repo = AsyncMock()
    repo.transaction = make_transaction(mock_session)
    return repo


@pytest.fixture
def mock_industry_repo():
    return AsyncMock()


@pytest.fixture
def mock_field_of_work_repo():
    return AsyncMock()


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════


@pytest_asyncio.fixture
async def sqlite_engine():
    """
    In-memory SQLite shared by every session of one test.

    StaticPool keeps the single connection (and so the database) alive;
    PRAGMA foreign_keys makes SQLite enforce ON DELETE RESTRICT.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return create_session_factory(sqlite_engine)


@pytest.fixture
def test_settings():
    return Settings(
        database_url="sqlite+aiosqlite://",
        admin_api_key=TEST_ADMIN_KEY,
        rate_limit_requests=1000,
        log_level="WARNING",
    )


@pytest.fixture
def test_app(test_settings, sqlite_engine, session_factory):
    from pastoral_admin.main import create_app

    return create_app(settings=test_settings, engine=sqlite_engine, session_factory=session_factory)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX client for an app backed by the in-memory database. Requests carry
    the admin key; use `anonymous_client` to test the guard.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-Admin-Key": TEST_ADMIN_KEY},
    ) as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_client(test_app):
    """Same app as test_client, without the admin key header."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
