"""Redis client for the persisted query store.

This module provides a thin Redis wrapper that includes:
- Connection pooling driven by RedisSettings
- Raw bytes get/set/delete (callers decide how to decode)
- Health checks
- A process-wide instance managed by the application lifespan
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from school_api.core.settings import RedisSettings

logger = logging.getLogger(__name__)


class RedisCache:
    """Redis client with connection pooling.

    Values are stored and returned as bytes.

    Example:
        cache = RedisCache(get_redis_settings())
        await cache.connect()

        await cache.set("key", b"value", ttl=3600)
        value = await cache.get("key")
        await cache.delete("key")

        await cache.disconnect()
    """

    def __init__(self, settings: RedisSettings) -> None:
        self.settings = settings
        self._pool: ConnectionPool | None = None
        self._client: Redis | None = None

    async def connect(self) -> None:
        """Create the connection pool and verify the server answers PING.

        Raises:
            RuntimeError: If no Redis URL is configured.
            RedisError: If the server does not answer. The pool is kept, so
                later commands reconnect once the server is reachable.
        """
        if not self.settings.redis_url:
            msg = "REDIS_URL is not configured"
            raise RuntimeError(msg)

        logger.info(
            "Connecting to Redis",
            extra={
                "max_connections": self.settings.max_connections,
                "socket_timeout": self.settings.socket_timeout,
            },
        )

        self._pool = ConnectionPool.from_url(
            self.settings.redis_url,
            **self.settings.connection_pool_kwargs(),
        )
        self._client = Redis(connection_pool=self._pool)

        await cast("Awaitable[bool]", self._client.ping())
        logger.info("Redis connection established successfully")

    async def disconnect(self) -> None:
        """Close Redis connection and cleanup resources."""
        logger.info("Disconnecting from Redis")

        if self._client:
            await cast("Any", self._client).aclose()
            self._client = None

        if self._pool:
            await cast("Any", self._pool).aclose()
            self._pool = None

        logger.info("Redis connection closed")

    @property
    def client(self) -> Redis:
        """Get the Redis client instance.

        Raises:
            RuntimeError: If not connected.
        """
        if self._client is None:
            msg = "Redis client not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._client

    async def get(self, key: str) -> bytes | None:
        return await self.client.get(key)

    async def set(self, key: str, value: bytes | str, ttl: int | None = None) -> bool:
        """Store a value, expiring after ``ttl`` seconds when given."""
        return bool(await self.client.set(key, value, ex=ttl))

    async def delete(self, key: str) -> bool:
        return bool(await self.client.delete(key))

    async def health_check(self) -> bool:
        """Check if Redis is healthy and responsive."""
        try:
            await cast("Awaitable[bool]", self.client.ping())
        except (RedisError, OSError, RuntimeError) as e:
            logger.warning("Redis health check failed", extra={"error": str(e)})
            return False
        return True


# Global cache instance
_cache: RedisCache | None = None


async def start_cache(settings: RedisSettings) -> RedisCache | None:
    """Initialize the global Redis cache.

    Best-effort: an unreachable server is logged and the client kept, so
    the service starts and persisted queries degrade to misses.

    Returns:
        The cache, or None when Redis is not configured.
    """
    global _cache

    if not settings.is_configured:
        logger.info("REDIS_URL not set, persisted queries disabled")
        return None

    logger.info("Starting Redis cache")
    _cache = RedisCache(settings)
    try:
        await _cache.connect()
    except (RedisError, OSError) as e:
        logger.warning("Redis not reachable at startup", extra={"error": str(e)})
    return _cache


async def stop_cache() -> None:
    """Close the global Redis cache."""
    global _cache

    if _cache is None:
        return
    logger.info("Stopping Redis cache")
    try:
        await _cache.disconnect()
    except (RedisError, OSError) as e:
        logger.warning("Error stopping Redis cache", extra={"error": str(e)})
    finally:
        _cache = None


def get_cache() -> RedisCache | None:
    """Get the global Redis cache instance, or None if not initialized."""
    return _cache
