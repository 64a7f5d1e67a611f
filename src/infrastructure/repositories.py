"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

The repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.  Rows are returned as domain ``School``
entities; any SQLAlchemy failure is logged and re-raised as
``StorageError``.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import SchoolModel
from src.domain.entities import School
from src.domain.errors import StorageError
from src.domain.ranking import validate_coordinates

logger = logging.getLogger(__name__)

# Connection failures from the async drivers surface as plain OSError.
STORAGE_ERRORS = (SQLAlchemyError, OSError)


def _to_entity(row: SchoolModel) -> School:
    return School(
        id=row.id,
        name=row.name,
        address=row.address,
        latitude=row.latitude,
        longitude=row.longitude,
    )


class SchoolRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_school(
        self,
        *,
        name: str,
        address: str,
        latitude: float,
        longitude: float,
    ) -> School:
        """Insert one school and flush so the generated id is available."""
        location = validate_coordinates(latitude, longitude)
        school = SchoolModel(
            name=name,
            address=address,
            latitude=location.latitude,
            longitude=location.longitude,
        )
        try:
            self.session.add(school)
            await self.session.flush()
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to insert school %r", name)
            raise StorageError("Could not store school") from exc
        return _to_entity(school)

    async def list_all(self) -> list[School]:
        try:
            result = await self.session.execute(
                select(SchoolModel).order_by(SchoolModel.id)
            )
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to read schools")
            raise StorageError("Could not read schools") from exc
        return [_to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        try:
            result = await self.session.execute(
                select(func.count()).select_from(SchoolModel)
            )
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to count schools")
            raise StorageError("Could not count schools") from exc
        return result.scalar() or 0

    async def commit(self) -> None:
        """Commit the unit of work before the response is built."""
        try:
            await self.session.commit()
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to commit school transaction")
            await self.session.rollback()
            raise StorageError("Could not commit transaction") from exc
