"""Redis client for token revocation and trending searches."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..config import get_settings
from .logging import get_logger

logger = get_logger("redis")

TRENDING_KEY_PREFIX = "search:trending"
MAX_TRACKED_QUERY_LENGTH = 100


def normalize_query(query: str) -> str:
    """Canonical form used to count a search query."""
    return " ".join(query.split()).lower()[:MAX_TRACKED_QUERY_LENGTH]


class RedisClient:
    """Thin async wrapper around redis-py.

    Every operation degrades to a no-op when Redis is not connected, so the
    API keeps working without it.
    """

    def __init__(self):
        self.settings = get_settings()
        self.redis: Optional[redis.Redis] = None

    @property
    def is_connected(self) -> bool:
        return self.redis is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        client = redis.from_url(
            self.settings.redis_url,
            max_connections=self.settings.redis_max_connections,
            decode_responses=True,
        )
        try:
            # Test connection
            await client.ping()
        except RedisError as e:
            logger.error(f"Failed to connect to Redis: {e}")
            await client.aclose()
            raise
        self.redis = client
        logger.info("Connected to Redis successfully")

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def get(self, key: str) -> Optional[str]:
        """Get value from Redis."""
        if not self.redis:
            return None
        try:
            return await self.redis.get(key)
        except RedisError as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            return None

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> bool:
        """Set value in Redis with optional expiration."""
        if not self.redis:
            return False
        try:
            if expire:
                return bool(await self.redis.setex(key, expire, value))
            return bool(await self.redis.set(key, value))
        except RedisError as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """Delete key from Redis."""
        if not self.redis:
            return False
        try:
            return await self.redis.delete(key) > 0
        except RedisError as e:
            logger.error(f"Redis DELETE error for key {key}: {e}")
            return False

    async def exists(self, key: str) -> bool:
        """Check if key exists in Redis."""
        if not self.redis:
            return False
        try:
            return await self.redis.exists(key) > 0
        except RedisError as e:
            logger.error(f"Redis EXISTS error for key {key}: {e}")
            return False

    # Token revocation

    async def add_to_blacklist(self, token_jti: str, expire: int) -> bool:
        """Revoke a token until it would have expired anyway."""
        return await self.set(f"blacklist:{token_jti}", "revoked", expire)

    async def is_token_blacklisted(self, token_jti: str) -> bool:
        return await self.exists(f"blacklist:{token_jti}")

    # Trending searches, counted in hourly buckets

    @staticmethod
    def _bucket_key(moment: datetime) -> str:
        return f"{TRENDING_KEY_PREFIX}:{moment.strftime('%Y%m%d%H')}"

    def _window_keys(self, now: datetime) -> List[str]:
        hours = max(self.settings.trending_window_hours, 1)
        return [self._bucket_key(now - timedelta(hours=h)) for h in range(hours)]

    async def record_search_query(self, query: str) -> bool:
        """Count one occurrence of ``query`` in the current hour's bucket."""
        if not self.redis:
            return False
        member = normalize_query(query)
        if not member:
            return False

        key = self._bucket_key(datetime.now(timezone.utc))
        try:
            async with self.redis.pipeline() as pipe:
                pipe.zincrby(key, 1, member)
                pipe.expire(key, self.settings.trending_window_hours * 3600)
                await pipe.execute()
            return True
        except RedisError as e:
            logger.error(f"Failed to record search query: {e}")
            return False

    async def get_trending(self, limit: int) -> List[Tuple[str, int]]:
        """Most searched queries over the trending window, highest count first."""
        if not self.redis:
            return []
        try:
            rows = await self.redis.zunion(
                self._window_keys(datetime.now(timezone.utc)), withscores=True
            )
        except RedisError as e:
            logger.error(f"Failed to read trending queries: {e}")
            return []

        ranked = sorted(((member, int(score)) for member, score in rows), key=lambda r: (-r[1], r[0]))
        return ranked[:limit]


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
