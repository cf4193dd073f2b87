"""
Dashboard Service - Main Application
====================================

FastAPI application for the framework dashboard.

Version: 0.1.0
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from services.dashboard.routes import cache, frameworks
from shared.config import settings
from shared.database.postgres import PostgresClient
from shared.database.redis import RedisClient
from shared.logging import get_logger, setup_logging
from shared.models.common import HealthResponse

setup_logging(
    log_level=settings.log_level.value,
    json_logs=settings.is_production,
    service_name="dashboard",
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Application lifespan manager."""
    logger.info(
        "dashboard_starting",
        environment=settings.environment.value,
        port=settings.ports.dashboard,
    )

    try:
        PostgresClient.get_engine()
        RedisClient.get_client()
    except Exception as e:
        logger.error("startup_failed", error=str(e))
        raise

    yield

    logger.info("dashboard_shutting_down")
    await PostgresClient.close()
    await RedisClient.close()


app = FastAPI(
    title="Bubba Dashboard Service",
    description="Framework and control tracking",
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


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Service health check including PostgreSQL and Redis."""
    components: dict[str, dict[str, Any]] = {
        "postgres": await PostgresClient.health_check(),
        "redis": await RedisClient.health_check(),
    }

    all_healthy = all(c.get("status") == "healthy" for c in components.values())

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        service="dashboard",
        version="0.1.0",
        components=components,
    )


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(
    frameworks.router,
    prefix="/frameworks",
    tags=["Frameworks"],
)

app.include_router(
    cache.router,
    prefix="/api/v1/cache",
    tags=["Cache"],
)


# ============================================================================
# Error Handlers
# ============================================================================


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
        "services.dashboard.main:app",
        host="0.0.0.0",
        port=settings.ports.dashboard,
        reload=settings.debug,
        log_level=settings.log_level.value.lower(),
    )
