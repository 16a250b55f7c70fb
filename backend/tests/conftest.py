"""
QuickNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── mock_db_session: AsyncMock session (store unit tests, fault injection)
    ├── db_engine: in-memory SQLite engine with the notes table created
    ├── test_app: fresh FastAPI app whose sessions come from db_engine
    └── test_client: HTTPX AsyncClient talking to test_app over ASGITransport
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any quicknotes imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from quicknotes import database
from quicknotes.main import create_app


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = []
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite database shared by every session of one test.

    StaticPool keeps the single connection alive; without it each new
    connection would see a fresh, empty database.
    """
    engine = database.build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await database.create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def test_app(db_engine, session_factory, monkeypatch):
    """
    A fresh app wired to the test database.

    The real get_db_session dependency stays in place; only the engine and
    session factory it reads are swapped.
    """
    monkeypatch.setattr(database, "engine", db_engine)
    monkeypatch.setattr(database, "async_session_factory", session_factory)
    return create_app()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_note_data():
    return {"title": "Groceries", "content": "Milk, eggs, bread"}
