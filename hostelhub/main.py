"""
HostelHub API - FastAPI Application

Main entry point for the FastAPI application.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from hostelhub.config import get_settings
from hostelhub.core.cache import close_telemetry_store, init_telemetry_store
from hostelhub.core.database import close_db, init_db
from hostelhub.core.middleware import register_middlewares
from hostelhub.models.contracts.common import ErrorResponse
from hostelhub.routers import (
    auth_router,
    dashboard_router,
    health_router,
    hostels_router,
    reviews_router,
    speedtest_router,
    uploads_router,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _field_errors(errors: list[dict]) -> dict[str, str]:
    return {".".join(str(loc) for loc in e["loc"]): e["msg"] for e in errors}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    The database is required; Redis is not. A telemetry store that fails to
    connect leaves the app running with trending disabled.
    """
    # Startup
    logger.info("Starting HostelHub API...")
    settings = get_settings()

    logger.info("Initializing database connection...")
    await init_db()
    logger.info("Database connection established")

    store = await init_telemetry_store()
    if store.is_ready:
        logger.info("Redis telemetry ready")
    else:
        logger.warning("Redis telemetry unavailable - trending disabled")

    logger.info(f"HostelHub API started in {settings.environment} mode")

    yield

    # Shutdown
    logger.info("Shutting down HostelHub API...")
    await close_telemetry_store()
    await close_db()
    logger.info("HostelHub API shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="HostelHub API",
        description="Hostel reviews with view telemetry and a network speed test",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_middlewares(app)

    # ==========================================================================
    # Global Exception Handlers
    # ==========================================================================

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed path, query or form parameters -> 422."""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="validation_error",
                message="Validation failed",
                details={"fields": _field_errors(list(exc.errors()))},
            ).model_dump(),
        )

    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_handler(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        """Pydantic model validation errors -> 422."""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="validation_error",
                message="Validation failed",
                details={"fields": _field_errors(exc.errors())},
            ).model_dump(),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        """Database constraint violations -> 409."""
        detail = str(exc.orig) if exc.orig else str(exc)
        if "unique" in detail.lower() or "duplicate" in detail.lower():
            message = "Resource already exists"
        elif "foreign key" in detail.lower():
            message = "Referenced resource not found"
        else:
            message = "Database constraint violation"

        logger.warning(f"IntegrityError: {detail}")
        return JSONResponse(
            status_code=409,
            content=ErrorResponse(error="conflict", message=message).model_dump(),
        )

    @app.exception_handler(NoResultFound)
    async def no_result_handler(request: Request, exc: NoResultFound) -> JSONResponse:
        """Query returned no results -> 404."""
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error="not_found", message="Resource not found").model_dump(),
        )

    @app.exception_handler(OperationalError)
    async def operational_error_handler(request: Request, exc: OperationalError) -> JSONResponse:
        """Database connection issues -> 503."""
        logger.error(f"Database operational error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(
                error="service_unavailable",
                message="Service temporarily unavailable",
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions -> 500."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_error",
                message="An unexpected error occurred",
            ).model_dump(),
        )

    # ==========================================================================
    # Register Routers
    # ==========================================================================
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(hostels_router)
    app.include_router(reviews_router)
    app.include_router(speedtest_router)
    app.include_router(uploads_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hostelhub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
