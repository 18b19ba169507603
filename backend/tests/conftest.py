"""
Warehouse Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── fresh_schema: Empty tables in the throwaway SQLite database
    └── test_client: HTTPX AsyncClient wired to the FastAPI app

The app talks to a file-backed SQLite database through aiosqlite instead of
PostgreSQL; JSONB falls back to JSON and upserts use the SQLite dialect.
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before anything imports warehouse.config
_test_dir = tempfile.mkdtemp(prefix="warehouse_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from warehouse import models  # noqa: E402,F401
from warehouse.database import Base, engine, init_schema  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session bound to a PostgreSQL "engine".

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value = result
            await record_service.list_records(mock_db_session, Schedule)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()

    bind = MagicMock()
    bind.dialect.name = "postgresql"
    session.get_bind = MagicMock(return_value=bind)
    return session


@pytest_asyncio.fixture
async def fresh_schema():
    """
    Drops and re-creates every table, then disposes the pool afterwards.

    Disposing keeps pooled aiosqlite connections from leaking into the next
    test's event loop.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await init_schema()
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(fresh_schema):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so ``fresh_schema`` performs
    the bootstrap the lifespan would.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from warehouse.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user():
    return {"username": "alice", "password": "s3cret", "role": "admin"}
