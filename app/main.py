import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.cache.redis_cache import CacheService
from app.infrastructure.config.settings import get_settings
from app.infrastructure.persistence.database import engine, get_db, init_models
from app.presentation.api.dependencies import get_cache_service, set_cache_service
from app.presentation.api.v1.routes import tenancy
from app.presentation.error_handlers import register_exception_handlers
from app.presentation.middleware.correlation import CorrelationIDMiddleware
from app.shared.logging import setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    setup_logging()

    # Production schemas are migrated; create_all is for local development only
    if settings.database_create_tables:
        await init_models()
        logger.info("Database tables created")

    if settings.redis_enabled:
        try:
            cache_service = CacheService()
            await cache_service.connect()
            set_cache_service(cache_service)
            logger.info("Redis cache initialized successfully")
        except Exception as e:
            logger.warning(f"Redis cache initialization failed: {e}. Continuing without cache.")
    else:
        logger.info("Redis cache disabled in configuration")

    yield

    if settings.redis_enabled:
        try:
            cache = await get_cache_service()
            await cache.disconnect()
        except Exception as e:
            logger.warning(f"Error during cache shutdown: {e}")

    await engine.dispose()
    logger.info("Database engine disposed")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Correlation ID for request tracing
app.add_middleware(CorrelationIDMiddleware)

# allow_credentials=True requires specific origins (not wildcard)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tenancy.router, prefix="/tenants", tags=["tenancy"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
    - 200 OK if the database answers
    - 503 Service Unavailable otherwise (cache state is reported, never required)
    """
    checks: dict[str, Any] = {
        "api": True,
        "database": False,
        "cache": None,  # None = not configured, True = healthy, False = unhealthy
    }

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = True

        if settings.redis_enabled:
            cache = await get_cache_service()
            checks["cache"] = cache.is_available()

        return {"status": "healthy", "checks": checks}
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        checks["error"] = str(e)
        return JSONResponse(status_code=503, content={"status": "unhealthy", "checks": checks})
