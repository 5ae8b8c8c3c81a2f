from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from registry_api.core.logging import configure_logging, correlation_id_var
from registry_api.core.settings import get_app_settings
from registry_api.db.run_migrations import main as run_alembic
from registry_api.db.seed import seed_all
from registry_api.db.session import dispose_engine
from registry_api.schemas.common import ErrorInfo, ErrorResponse, MessageResponse

from registry_api.api.routes.associations import router as associations_router
from registry_api.api.routes.bases import router as bases_router
from registry_api.api.routes.components import router as components_router
from registry_api.api.routes.dashboard import router as dashboard_router
from registry_api.api.routes.equipment import router as equipment_router
from registry_api.api.routes.equipment_types import router as equipment_types_router
from registry_api.api.routes.hierarchy import router as hierarchy_router
from registry_api.api.routes.reports import router as reports_router
from registry_api.api.routes.spare_parts import router as spare_parts_router
from registry_api.api.routes.suppliers import router as suppliers_router
from registry_api.api.routes.workshops import router as workshops_router

settings = get_app_settings()

# Configure structured logging once at import
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Bases", "description": "Manufacturing bases (sites)."},
    {"name": "Workshops", "description": "Workshops within a base."},
    {"name": "Equipment Types", "description": "Equipment type catalog."},
    {"name": "Equipment", "description": "Equipment register with paginated search."},
    {"name": "Components", "description": "Components defined per equipment type."},
    {"name": "Spare Parts", "description": "Spare part master data."},
    {"name": "Suppliers", "description": "Spare part suppliers and supply cycles."},
    {"name": "Associations", "description": "Equipment / component / spare part links and advanced query."},
    {"name": "Hierarchy", "description": "Base and equipment tree views."},
    {"name": "Dashboard", "description": "Entity counts and distributions."},
    {"name": "Reports", "description": "Exportable reports (CSV/Excel/PDF)."},
]

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    openapi_tags=openapi_tags,
)

# CORS - avoid wildcard with credentials
cors_allow_credentials = settings.CORS_ALLOW_CREDENTIALS
if settings.CORS_ORIGINS == ["*"] and cors_allow_credentials:
    logger.warning("CORS_ALLOW_CREDENTIALS=True with '*' origins is not permitted; disabling credentials.")
    cors_allow_credentials = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=cors_allow_credentials,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """
    Attach a correlation_id to the request for logging and error responses.
    Adds 'X-Correlation-ID' to every response.
    """
    corr = request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID") or str(uuid4())
    token_corr = correlation_id_var.set(corr)
    request.state.correlation_id = corr

    logger.info("Incoming request %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    finally:
        correlation_id_var.reset(token_corr)

    response.headers["X-Correlation-ID"] = corr
    return response


def _build_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Any | None = None,
) -> JSONResponse:
    """Build a standardized ErrorResponse JSONResponse."""
    err = ErrorResponse(
        status=status_code,
        error=ErrorInfo(type=error_type, message=message, details=details),
        correlation_id=getattr(request.state, "correlation_id", None),
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(tz=timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=err.model_dump(mode="json"))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Global handler for HTTP errors, route-level and unmatched paths alike,
    to produce a standardized error envelope.
    """
    detail = exc.detail if isinstance(exc.detail, str) else "HTTP Error"
    return _build_error_response(
        request=request,
        status_code=exc.status_code,
        error_type="http_error",
        message=str(detail),
        details=None if isinstance(exc.detail, str) else exc.detail,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Malformed bodies and query parameters are client errors (400).
    """
    return _build_error_response(
        request=request,
        status_code=400,
        error_type="validation_error",
        message="Request validation failed",
        details=jsonable_encoder(exc.errors()),
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Database failures (constraint violations included) surface as 500 with the
    driver message, e.g. deleting a base that still has workshops.
    """
    logger.error("Database error processing request: %s", exc)
    message = str(getattr(exc, "orig", None) or exc)
    return _build_error_response(
        request=request,
        status_code=500,
        error_type="database_error",
        message=message,
        details=None,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler to avoid leaking stack traces and to return a structured error.
    """
    logger.exception("Unhandled error processing request")
    return _build_error_response(
        request=request,
        status_code=500,
        error_type="internal_error",
        message="An unexpected error occurred",
        details=None,
    )


@app.on_event("startup")
async def on_startup() -> None:
    """
    Run migrations and optional seeding on service startup.

    Alembic's env.py drives its own event loop, so the upgrade runs in a worker thread.
    """
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        try:
            logger.info("Running Alembic migrations: upgrade head")
            await asyncio.to_thread(run_alembic, ["upgrade", "head"])
            logger.info("Migrations completed.")
        except Exception as exc:
            logger.exception("Migration step failed: %s", exc)

    if settings.AUTO_SEED:
        try:
            logger.info("Running database seeding...")
            await seed_all()
            logger.info("Seeding completed.")
        except Exception as exc:
            logger.exception("Seeding step failed: %s", exc)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await dispose_engine()


api = APIRouter(prefix="/api")


# PUBLIC_INTERFACE
@api.get(
    "/health",
    response_model=MessageResponse,
    summary="Health Check",
    tags=["Health"],
)
def health_check() -> MessageResponse:
    """
    Basic liveness health check endpoint.

    Returns:
        MessageResponse: Simple confirmation that the service is running.
    """
    return MessageResponse(message="Healthy")


api.include_router(bases_router)
api.include_router(workshops_router)
api.include_router(equipment_types_router)
api.include_router(equipment_router)
api.include_router(components_router)
api.include_router(spare_parts_router)
api.include_router(suppliers_router)
api.include_router(associations_router)
api.include_router(hierarchy_router)
api.include_router(dashboard_router)
api.include_router(reports_router)

app.include_router(api)
