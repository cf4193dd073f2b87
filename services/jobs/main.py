"""
Jobs Service - Main Application
===============================

FastAPI application exposing registered background tasks to the task
queue worker.

Version: 0.1.0
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

import services.jobs.tasks  # noqa: F401  registers tasks
from services.jobs.registry import registered_tasks
from services.jobs.routes import tasks
from shared.config import settings
from shared.integrations import ConfigurationError, ExternalServiceError
from shared.logging import get_logger, setup_logging
from shared.models.common import HealthResponse

setup_logging(
    log_level=settings.log_level.value,
    json_logs=settings.is_production,
    service_name="jobs",
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Application lifespan manager."""
    logger.info(
        "jobs_starting",
        environment=settings.environment.value,
        port=settings.ports.jobs,
        tasks=registered_tasks(),
    )

    yield

    logger.info("jobs_shutting_down")


app = FastAPI(
    title="Bubba Jobs Service",
    description="Background task execution",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Service health check."""
    return HealthResponse(
        service="jobs",
        version="0.1.0",
        components={"registry": {"status": "healthy", "tasks": len(registered_tasks())}},
    )


app.include_router(
    tasks.router,
    prefix="/api/v1/tasks",
    tags=["Tasks"],
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "status_code": exc.status_code,
        },
        headers=exc.headers,
    )


@app.exception_handler(ExternalServiceError)
async def external_service_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    """A provider call failed; the queue retries the run."""
    logger.error(
        "external_service_error",
        service=exc.service,
        status_code=exc.status_code,
        error=str(exc),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "success": False,
            "error": str(exc),
            "status_code": 502,
        },
    )


@app.exception_handler(ConfigurationError)
async def configuration_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Missing provider credentials."""
    logger.error("configuration_error", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": str(exc),
            "status_code": 500,
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal server error",
            "status_code": 500,
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.jobs.main:app",
        host="0.0.0.0",
        port=settings.ports.jobs,
        reload=settings.debug,
        log_level=settings.log_level.value.lower(),
    )
