# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .api import (
    analytics_router,
    auth_router,
    health_router,
    notifications_router,
    posts_router,
    search_router,
    users_router,
)
from .config import get_settings
from .core.exceptions import AppError, StoreError, ValidationError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(
        "Starting LinkHub application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # Redis is optional: revocation and live trending are skipped without it
    redis_client = get_redis_client()
    try:
        await redis_client.connect()
    except RedisError as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without Redis...")

    # Tests run against their own in-memory database
    if os.getenv("LINKHUB_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to LINKHUB_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except SQLAlchemyError as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    # Shutdown
    logger.info("Shutting down LinkHub application")
    await redis_client.disconnect()


app = FastAPI(
    title=settings.app_name,
    description="Professional networking API: profiles, posts, search, notifications",
    version=__version__,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handlers: every failure is rendered as {"message", "error"}


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    error = ValidationError("Invalid request", error=details)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "Database error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    error = StoreError(error=exc.__class__.__name__)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(search_router, prefix="/api")
app.include_router(notifications_router, prefix="/api")
app.include_router(analytics_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {"message": "LinkHub API"}


# API root endpoint for better navigation
@app.get("/api/")
async def api_root():
    return {
        "message": "LinkHub API",
        "version": __version__,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json",
        },
        "endpoints": {
            "authentication": "/api/auth/",
            "users": "/api/users/",
            "posts": "/api/posts",
            "search": "/api/search",
            "notifications": "/api/notifications",
            "analytics": "/api/analytics/",
            "health": "/api/health/",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("linkhub.main:app", host=settings.host, port=settings.port, reload=settings.reload)
