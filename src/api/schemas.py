"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────


class SchoolCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    # Lax mode: numeric strings such as "12.5" are accepted.
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = {"str_strip_whitespace": True}


# ── Responses ─────────────────────────────────────────────────────────


class SchoolCreatedResponse(BaseModel):
    message: str = "School added successfully"
    school_id: int = Field(..., alias="schoolId")

    model_config = {"populate_by_name": True}


class SchoolDistanceResponse(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float = Field(..., description="Kilometres, rounded to 2 decimals")


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
