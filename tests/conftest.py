"""
Book Catalog Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── mock_db_session: Mock AsyncSession (service unit tests, no DB)
    ├── db_engine: In-memory aiosqlite engine with the schema created
    ├── db_session_factory: Session factory bound to db_engine
    ├── test_client: HTTPX AsyncClient with get_db_session pointed at db_engine
    └── server_error_client: test_client that returns unhandled errors as 500s
"""

import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from uuid import uuid4

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db_session  # noqa: E402
from app.models.book import Book  # noqa: E402,F401


CLEAN_CODE_ISBN = "9780132350884"


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_book(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = book
            result = await book_service.get_book(mock_db_session, book_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_book_data():
    """A dictionary matching the Book model fields."""
    now = datetime.now(timezone.utc)
    return {
        "id": uuid4(),
        "title": "Clean Code",
        "isbn": CLEAN_CODE_ISBN,
        "created_at": now,
        "updated_at": now,
        "is_deleted": False,
    }


@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@asynccontextmanager
async def _app_client(db_session_factory, raise_app_exceptions: bool = True):
    from app.main import app

    async def override_get_db_session():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(db_session_factory):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    get_db_session is overridden to use the per-test SQLite engine with the
    same commit/rollback behaviour as the real dependency.
    """
    async with _app_client(db_session_factory) as client:
        yield client


@pytest_asyncio.fixture
async def server_error_client(db_session_factory):
    """
    Same as test_client, but an unhandled exception comes back as the app's
    500 response instead of being re-raised into the test.
    """
    async with _app_client(db_session_factory, raise_app_exceptions=False) as client:
        yield client
