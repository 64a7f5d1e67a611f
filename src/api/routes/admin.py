"""
Admin / observability endpoints
===============================

GET /health -- liveness check, does not touch the database
"""

from fastapi import APIRouter

from src.api.schemas import HealthResponse

router = APIRouter(tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
