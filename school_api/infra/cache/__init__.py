"""Redis cache infrastructure."""

from __future__ import annotations

from .redis import RedisCache, get_cache, start_cache, stop_cache

__all__ = ["RedisCache", "get_cache", "start_cache", "stop_cache"]
