"""
Camp API Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Points the app at a throwaway SQLite file (aiosqlite) BEFORE any
       camp_api import, so the module-level engine never sees the default
       PostgreSQL URL.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:  AsyncMock session for service unit tests
    ├── database:         fresh empty schema on the SQLite file
    ├── seeded_database:  database + the nine sample campers
    └── test_client:      HTTPX AsyncClient bound to create_app()
"""

import os
import tempfile

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup (must run before camp_api is imported)
# ══════════════════════════════════════════════════════════════════════════

_TEST_DB_DIR = tempfile.mkdtemp(prefix="camp_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
# v2 is only registered by tests that build their own registry
os.environ["API_VERSIONS"] = "v1,v2"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from camp_api.database import (  # noqa: E402
    async_session_factory,
    create_tables,
    dispose_engine,
    drop_tables,
)
from camp_api.seed import seed_sample_data  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        mock_db_session.execute.return_value = mock_result
        records = await collection_service.list_all(mock_db_session, Camper)
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
async def database():
    """Empty campsites/campers tables, dropped again after the test."""
    await drop_tables()
    await create_tables()
    yield
    await drop_tables()
    await dispose_engine()


@pytest_asyncio.fixture
async def seeded_database(database):
    """The nine sample campers across three campsites."""
    async with async_session_factory() as session:
        async with session.begin():
            await seed_sample_data(session)
    yield


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient talking to a fresh app via ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from camp_api.main import create_app

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
