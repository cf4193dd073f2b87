"""
Marketing Service - Main Application
====================================

FastAPI application for the marketing site's server actions.

Version: 0.1.0
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from services.marketing.routes import waitlist
from services.marketing.services.waitlist import AlreadyRegisteredError
from shared.config import settings
from shared.integrations import ConfigurationError, ExternalServiceError
from shared.logging import get_logger, setup_logging
from shared.models.common import ErrorResponse, HealthResponse

setup_logging(
    log_level=settings.log_level.value,
    json_logs=settings.is_production,
    service_name="marketing",
)

logger = get_logger(__name__)

SERVICE_UNAVAILABLE_MESSAGE = "Could not join the waitlist right now. Please try again later."


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Application lifespan manager."""
    logger.info(
        "marketing_starting",
        environment=settings.environment.value,
        port=settings.ports.marketing,
        webhook_configured=bool(settings.discord.webhook_url),
        analytics_enabled=settings.analytics.enabled,
    )

    yield

    logger.info("marketing_shutting_down")


app = FastAPI(
    title="Bubba Marketing Service",
    description="Marketing site actions",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins_list,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Service health check."""
    return HealthResponse(service="marketing", version="0.1.0")


app.include_router(
    waitlist.router,
    prefix="/api/v1/waitlist",
    tags=["Waitlist"],
)


# ============================================================================
# Error Handlers
# ============================================================================


def _error(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(error=message, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(AlreadyRegisteredError)
async def already_registered_handler(request: Request, exc: AlreadyRegisteredError) -> JSONResponse:
    """Duplicate signup."""
    return _error(status.HTTP_409_CONFLICT, str(exc))


@app.exception_handler(ExternalServiceError)
async def external_service_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    """A provider call failed."""
    logger.error(
        "external_service_error",
        service=exc.service,
        status_code=exc.status_code,
        error=str(exc),
        path=request.url.path,
    )
    return _error(status.HTTP_502_BAD_GATEWAY, SERVICE_UNAVAILABLE_MESSAGE)


@app.exception_handler(ConfigurationError)
async def configuration_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Missing provider credentials."""
    logger.error("configuration_error", error=str(exc), path=request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
    )
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.marketing.main:app",
        host="0.0.0.0",
        port=settings.ports.marketing,
        reload=settings.debug,
        log_level=settings.log_level.value.lower(),
    )
