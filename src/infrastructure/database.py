"""
Async SQLAlchemy engine and session factory.

Built from an explicit ``Settings`` object at application startup rather
than at import time, so tests and scripts can point the service at any
database.  ``asyncpg`` is the default PostgreSQL driver.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.config import Settings


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


def build_engine(settings: Settings, **kwargs) -> AsyncEngine:
    options = {"echo": False, "pool_pre_ping": True}
    options.update(kwargs)
    return create_async_engine(settings.sqlalchemy_url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables.  Idempotent; existing tables are left alone."""
    # Register models on Base.metadata before create_all.
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
