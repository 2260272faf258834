"""Health checks for the probes and the health report.

Usage:
    >>> from school_api.features.health.service import HealthServiceDep
    >>>
    >>> @router.get("/readiness")
    >>> async def readiness(service: HealthServiceDep):
    ...     return await service.check_readiness()
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends

from school_api.core.settings import (
    get_app_settings,
    get_health_settings,
    get_redis_settings,
)
from school_api.infra.cache import get_cache
from school_api.infra.database import ping_database

from .schemas import HealthResponse, HealthStatus, LivenessResponse, ReadinessResponse

if TYPE_CHECKING:
    from school_api.core.settings import AppSettings, HealthSettings, RedisSettings
    from school_api.infra.cache import RedisCache

logger = logging.getLogger(__name__)

__all__ = [
    "HealthService",
    "HealthServiceDep",
    "get_health_service",
    "thread_count",
]

PROC_STAT = Path("/proc/self/stat")

# Position of num_threads in /proc/self/stat, counted from the field after
# the parenthesized command name (fields 1 and 2).
_NUM_THREADS_OFFSET = 20 - 3


def thread_count(stat_path: Path = PROC_STAT) -> int:
    """Threads in this process.

    Reads field 20 of ``/proc/self/stat`` on Linux and falls back to the
    number of Python threads elsewhere.
    """
    try:
        stat = stat_path.read_text()
        return int(stat.rsplit(")", 1)[1].split()[_NUM_THREADS_OFFSET])
    except (OSError, IndexError, ValueError):
        return threading.active_count()


class HealthService:
    """Runs dependency checks with the configured timeout."""

    def __init__(
        self,
        settings: HealthSettings,
        app_settings: AppSettings,
        redis_settings: RedisSettings,
        *,
        database_check: Callable[[float], Awaitable[bool]] = ping_database,
        cache_getter: Callable[[], RedisCache | None] = get_cache,
        thread_counter: Callable[[], int] = thread_count,
    ) -> None:
        self.settings = settings
        self.app_settings = app_settings
        self.redis_settings = redis_settings
        self._database_check = database_check
        self._cache_getter = cache_getter
        self._thread_counter = thread_counter

    def check_liveness(self) -> LivenessResponse:
        threads = self._thread_counter()
        alive = threads < self.settings.max_threads
        if not alive:
            logger.error(
                "Thread limit reached",
                extra={"threads": threads, "max_threads": self.settings.max_threads},
            )
        return LivenessResponse(alive=alive, threads=threads, max_threads=self.settings.max_threads)

    async def check_database(self) -> bool:
        return await self._database_check(self.settings.check_timeout)

    async def check_redis(self) -> bool:
        cache = self._cache_getter()
        if cache is None:
            return False
        try:
            async with asyncio.timeout(self.settings.check_timeout):
                return await cache.health_check()
        except TimeoutError:
            logger.warning("Redis health check timed out")
            return False

    async def run_checks(self) -> dict[str, bool]:
        """Run every enabled dependency check concurrently."""
        checks: dict[str, Awaitable[bool]] = {"database": self.check_database()}
        if self.settings.check_redis and self.redis_settings.is_configured:
            checks["redis"] = self.check_redis()

        results = await asyncio.gather(*checks.values())
        return dict(zip(checks, results, strict=True))

    async def check_readiness(self) -> ReadinessResponse:
        checks = await self.run_checks()
        return ReadinessResponse(ready=all(checks.values()), checks=checks)

    async def check_health(self) -> HealthResponse:
        checks = await self.run_checks()
        return HealthResponse(
            status=HealthStatus.HEALTHY if all(checks.values()) else HealthStatus.UNHEALTHY,
            timestamp=datetime.now(UTC),
            service=self.app_settings.service_name,
            version=self.app_settings.version,
            checks=checks,
            threads=self._thread_counter(),
        )


def get_health_service() -> HealthService:
    """FastAPI dependency building the health service from settings."""
    return HealthService(get_health_settings(), get_app_settings(), get_redis_settings())


HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]
