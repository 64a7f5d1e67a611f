"""
School endpoints
================

POST /addSchool     -- register a school (returns 201 with the new id)
GET  /listSchools   -- all schools, nearest to (latitude, longitude) first
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.schemas import (
    ErrorResponse,
    SchoolCreatedResponse,
    SchoolCreateRequest,
    SchoolDistanceResponse,
)
from src.domain.entities import Location
from src.domain.ranking import rank_by_proximity
from src.infrastructure.repositories import SchoolRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schools"])

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Missing or invalid input"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


@router.post(
    "/addSchool",
    status_code=201,
    response_model=SchoolCreatedResponse,
    summary="Register a school",
    responses=_ERRORS,
)
async def add_school(
    body: SchoolCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    repo = SchoolRepository(db)
    school = await repo.create_school(
        name=body.name,
        address=body.address,
        latitude=body.latitude,
        longitude=body.longitude,
    )
    # get_db's commit runs after the response has started; commit first.
    await repo.commit()
    logger.info("Registered school id=%s name=%r", school.id, school.name)
    return SchoolCreatedResponse(school_id=school.id)


@router.get(
    "/listSchools",
    response_model=list[SchoolDistanceResponse],
    summary="List schools sorted by distance",
    description=(
        "Returns every school with a ``distance`` field (km, 2 decimals), "
        "ordered nearest first from the given coordinate."
    ),
    responses=_ERRORS,
)
async def list_schools(
    latitude: float = Query(..., allow_inf_nan=False),
    longitude: float = Query(..., allow_inf_nan=False),
    db: AsyncSession = Depends(get_db),
):
    schools = await SchoolRepository(db).list_all()
    ranked = rank_by_proximity(Location(latitude, longitude), schools)
    return [r.as_dict() for r in ranked]
