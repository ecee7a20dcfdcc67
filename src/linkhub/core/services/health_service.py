"""Health service implementation."""

import time
from typing import Any, Dict

from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..logging import get_logger
from ..redis_client import get_redis_client
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService

logger = get_logger("services.health")


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status.

        The database is required; Redis is optional, so losing it only
        degrades the service.
        """
        db_health = await self.check_database_health()
        redis_health = await self.check_redis_health()

        if not db_health["connected"]:
            overall_status = "unhealthy"
        elif not redis_health["connected"]:
            overall_status = "degraded"
        else:
            overall_status = "healthy"

        return HealthCheckResponse(
            status=overall_status,
            version=self.settings.app_version,
            checks={"database": db_health, "redis": redis_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        start_time = time.perf_counter()
        try:
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return {"connected": False, "status": "unhealthy", "error": str(e)}

        response_time = (time.perf_counter() - start_time) * 1000
        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round(response_time, 2),
        }

    async def check_redis_health(self) -> Dict[str, Any]:
        """Check the shared Redis connection."""
        redis_client = get_redis_client()
        if not redis_client.is_connected:
            return {"connected": False, "status": "unavailable"}

        start_time = time.perf_counter()
        try:
            await redis_client.redis.ping()
        except RedisError as e:
            logger.warning(f"Redis health check failed: {e}")
            return {"connected": False, "status": "unhealthy", "error": str(e)}

        response_time = (time.perf_counter() - start_time) * 1000
        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round(response_time, 2),
        }
