"""
QuanThink Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine: SQLite (aiosqlite) engine on a throwaway file, tables created
    ├── session_factory / db_session: sessions bound to that engine
    ├── app: fresh FastAPI app whose get_db_session uses the test engine
    ├── test_client: HTTPX AsyncClient talking to `app` over ASGI
    └── calculation_data / user_data: request payloads
"""

import os
import tempfile

# Settings are read at import time, so the environment must be in place
# before anything from quanthink is imported.
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='quanthink_test_')}/test.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"  # Keep hashing fast in tests

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from quanthink.database import Base, get_db_session
from quanthink.models.calculation import Calculation  # noqa: F401
from quanthink.models.user import User  # noqa: F401


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    A real database for each test.

    Uses a file (not :memory:) so every pooled connection sees the same
    tables.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'quanthink.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """A session for store-level tests; callers commit explicitly."""
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(session_factory):
    """
    Fresh application wired to the test database.

    The override mirrors get_db_session: commit on success, rollback on error.
    """
    from quanthink.main import create_app

    application = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly into the app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Payload Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def calculation_data():
    return {"expression": "2 + 2", "result": "4", "library": "JAVA"}


@pytest.fixture
def user_data():
    return {"email": "a@x.com", "password": "p"}
