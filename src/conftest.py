import contextlib
from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.config.database import make_session_manager
from src.events.repository import orm_models  # noqa: F401  registers the tables
from src.main import app
from src.models.base import BaseModel

TEST_DATABASE_URL = "sqlite+aiosqlite://"

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
async def db_engine():
    """In-memory database shared by every session of one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
def session_manager(session_maker):
    return make_session_manager(session_maker)


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None, raise_app_exceptions: bool = True):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac
