"""FastAPI dependency injection helpers."""

from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.errors import StorageError
from src.infrastructure.repositories import STORAGE_ERRORS


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a per-request DB session; commit on success, rollback on error.

    The session (and its pooled connection) is released when the block
    exits, whichever path the request took.
    """
    factory = request.app.state.session_factory
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except STORAGE_ERRORS as exc:
            await session.rollback()
            raise StorageError("Database transaction failed") from exc
        except Exception:
            await session.rollback()
            raise
