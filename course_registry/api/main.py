"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, course_registry.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from course_registry.boundary.db import get_async_engine, init_models
from course_registry.configs import get_settings
from course_registry.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from .routers import admin_router, health_router, student_router
from .routers.router_utils import request_validation_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, creates missing tables on startup and disposes of
    the engine's connection pool on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={"app_name": settings.app_name, "environment": settings.environment},
    )

    if settings.database.create_tables_on_startup:
        await init_models()
        logger.info("Database tables ready")

    yield

    await get_async_engine().dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Course administration, registration and withdrawal with schedule conflict checks",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added last so it wraps request logging and the correlation ID is bound first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(admin_router, prefix="/api/v1")
    app.include_router(student_router, prefix="/api/v1")

    # Unversioned aliases keep the /student and /admin paths existing clients call
    app.include_router(admin_router, include_in_schema=False)
    app.include_router(student_router, include_in_schema=False)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        return {"message": "Course Registration API is running..."}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "course_registry.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
    )


if __name__ == "__main__":
    run()
