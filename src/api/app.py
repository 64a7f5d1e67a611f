"""
FastAPI application factory.

* Registers the school routes at the root (``/addSchool``, ``/listSchools``)
  plus ``/health``.
* Builds the database engine from the explicit settings on startup and
  disposes it on shutdown via lifespan events.
* Maps validation failures to 400 and storage failures to 500, always as
  ``{"error": "..."}``.
* Applies CORS and rate-limiting middleware; the limit comes from the
  settings passed to ``create_app``.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.middleware import build_limiter
from src.api.routes import admin, schools
from src.config import Settings, settings as default_settings
from src.domain.errors import StorageError, ValidationError
from src.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from src.infrastructure.repositories import STORAGE_ERRORS

logger = logging.getLogger(__name__)

MISSING_FIELDS = "All fields are required"
INVALID_COORDINATES = "Latitude and longitude must be numbers"
INVALID_QUERY = "Valid latitude and longitude parameters are required"
INTERNAL_ERROR = "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the connection pool on startup; dispose it on shutdown."""
    cfg: Settings = app.state.settings
    engine = build_engine(cfg)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    if cfg.create_tables:
        try:
            await create_schema(engine)
        except STORAGE_ERRORS:
            # Serve anyway; requests will report 500 until the DB is reachable.
            logger.exception("Could not create schema at startup")
    logger.info("Using database %s", engine.url.render_as_string(hide_password=True))
    yield
    await engine.dispose()


# ── Error translation ─────────────────────────────────────────────────


def validation_message(errors: list[dict]) -> str:
    """Collapse pydantic errors into the single message clients receive."""
    if any(err["loc"] and err["loc"][0] == "query" for err in errors):
        return INVALID_QUERY
    for err in errors:
        if err["type"] == "missing":
            return MISSING_FIELDS
        if err["type"] == "string_too_short" and err["loc"][-1] in ("name", "address"):
            return MISSING_FIELDS
    err = errors[0]
    field = err["loc"][-1] if err["loc"] else "body"
    if err["type"] == "json_invalid":
        return "Request body must be valid JSON"
    if field in ("latitude", "longitude") and err["type"] in (
        "float_parsing",
        "float_type",
        "finite_number",
    ):
        return INVALID_COORDINATES
    return f"{field}: {err['msg']}"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400, content={"error": validation_message(exc.errors())}
    )


async def domain_validation_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(
        "Storage failure on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    cfg = app_settings or default_settings
    logging.basicConfig(level=cfg.log_level.upper())

    app = FastAPI(
        title="School Locator API",
        description=(
            "Registers schools with their coordinates and lists them "
            "sorted by great-circle distance from a given location."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = cfg

    # Inside CORS, so 429 responses carry CORS headers too.
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiter
    app.state.limiter = build_limiter(cfg)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Routers
    app.include_router(schools.router)
    app.include_router(admin.router)

    return app
