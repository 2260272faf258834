"""Unit tests for the Redis cache wrapper."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from school_api.core.settings import RedisSettings
from school_api.infra.cache import redis as cache_module
from school_api.infra.cache.redis import RedisCache, get_cache, start_cache, stop_cache


@pytest.fixture
def settings() -> RedisSettings:
    return RedisSettings(redis_url="redis://cache:6379/0")


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.ping = AsyncMock(return_value=True)
    client.get = AsyncMock(return_value=b"value")
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def patched_redis(redis_client):
    pool = MagicMock()
    pool.aclose = AsyncMock()
    with (
        patch.object(cache_module.ConnectionPool, "from_url", return_value=pool) as from_url,
        patch.object(cache_module, "Redis", return_value=redis_client),
    ):
        yield from_url


@pytest.fixture(autouse=True)
async def _reset_global_cache():
    yield
    cache_module._cache = None


@pytest.mark.unit
class TestRedisCache:
    """Tests for RedisCache."""

    async def test_connect_uses_pool_settings(self, settings, patched_redis, redis_client):
        cache = RedisCache(settings)

        await cache.connect()

        patched_redis.assert_called_once()
        args, kwargs = patched_redis.call_args
        assert args == ("redis://cache:6379/0",)
        assert kwargs["decode_responses"] is False
        redis_client.ping.assert_awaited_once()

    async def test_connect_without_url(self):
        with pytest.raises(RuntimeError, match="REDIS_URL is not configured"):
            await RedisCache(RedisSettings()).connect()

    async def test_commands(self, settings, patched_redis, redis_client):
        cache = RedisCache(settings)
        await cache.connect()

        assert await cache.get("k") == b"value"
        assert await cache.set("k", b"v", ttl=30) is True
        redis_client.set.assert_awaited_once_with("k", b"v", ex=30)
        assert await cache.delete("k") is True

    async def test_client_before_connect(self, settings):
        with pytest.raises(RuntimeError, match="not connected"):
            _ = RedisCache(settings).client

    async def test_health_check_failure(self, settings, patched_redis, redis_client):
        cache = RedisCache(settings)
        await cache.connect()
        redis_client.ping.side_effect = RedisConnectionError("down")

        assert await cache.health_check() is False


@pytest.mark.unit
class TestGlobalCache:
    """Tests for start_cache/stop_cache."""

    async def test_not_configured(self):
        assert await start_cache(RedisSettings()) is None
        assert get_cache() is None

    async def test_unreachable_server_kept(self, settings, patched_redis, redis_client):
        """Startup continues; lookups will fail and count as misses."""
        redis_client.ping.side_effect = RedisConnectionError("down")

        cache = await start_cache(settings)

        assert cache is not None
        assert get_cache() is cache

    async def test_stop(self, settings, patched_redis, redis_client):
        await start_cache(settings)

        await stop_cache()

        redis_client.aclose.assert_awaited_once()
        assert get_cache() is None
