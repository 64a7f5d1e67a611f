"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
a PostgreSQL server.  ``StaticPool`` keeps a single connection alive so
every session sees the same in-memory database.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from src.config import Settings
from src.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_schema,
)


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


def make_test_settings(**overrides) -> Settings:
    values = {"database_url": TEST_DB_URL, "create_tables": False}
    values.update(overrides)
    return Settings(**values)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh schema per test; engine disposed afterwards."""
    engine = build_engine(make_test_settings(), poolclass=StaticPool)
    await create_schema(engine)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient bound to an app whose sessions come from the test DB."""
    from src.api.app import create_app

    app = create_app(make_test_settings())
    # ASGITransport does not run lifespan, so wire the session factory here.
    app.state.session_factory = session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
