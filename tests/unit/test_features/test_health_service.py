"""Unit tests for HealthService."""

from __future__ import annotations

import threading

import pytest

from school_api.core.settings import AppSettings, HealthSettings, RedisSettings
from school_api.features.health.schemas import HealthStatus
from school_api.features.health.service import HealthService, thread_count
from tests.conftest import FakeCache


def _service(
    *,
    database: bool = True,
    cache: FakeCache | None = None,
    redis_url: str | None = None,
    threads: int = 5,
    **health,
) -> HealthService:
    async def database_check(timeout: float) -> bool:
        return database

    return HealthService(
        HealthSettings(**health),
        AppSettings(),
        RedisSettings(redis_url=redis_url),
        database_check=database_check,
        cache_getter=lambda: cache,
        thread_counter=lambda: threads,
    )


@pytest.mark.unit
class TestLiveness:
    """Tests for the thread-count liveness check."""

    def test_alive_below_limit(self):
        result = _service(threads=9, max_threads=10).check_liveness()

        assert result.alive
        assert result.threads == 9
        assert result.max_threads == 10

    def test_dead_at_limit(self):
        assert not _service(threads=10, max_threads=10).check_liveness().alive

    def test_thread_count_from_proc_stat(self, tmp_path):
        # pid (comm with spaces) state ppid ... field 20 is num_threads
        fields = ["S", *[str(n) for n in range(4, 20)], "7", "0"]
        stat = tmp_path / "stat"
        stat.write_text(f"123 (python ) x) {' '.join(fields)}\n")

        assert thread_count(stat) == 7

    def test_thread_count_fallback(self, tmp_path):
        assert thread_count(tmp_path / "missing") == threading.active_count()


@pytest.mark.unit
class TestReadiness:
    """Tests for dependency checks."""

    async def test_database_only_when_redis_unset(self):
        result = await _service().check_readiness()

        assert result.ready
        assert result.checks == {"database": True}

    async def test_database_down(self):
        result = await _service(database=False).check_readiness()

        assert not result.ready

    async def test_redis_checked_when_configured(self):
        result = await _service(redis_url="redis://cache", cache=FakeCache()).check_readiness()

        assert result.checks == {"database": True, "redis": True}

    async def test_redis_down(self):
        service = _service(redis_url="redis://cache", cache=FakeCache(fail=True))

        result = await service.check_readiness()

        assert not result.ready
        assert result.checks["redis"] is False

    async def test_redis_check_disabled(self):
        service = _service(redis_url="redis://cache", cache=FakeCache(fail=True), check_redis=False)

        assert (await service.check_readiness()).ready

    async def test_redis_missing_client(self):
        assert await _service(redis_url="redis://cache").check_redis() is False


@pytest.mark.unit
class TestHealthReport:
    """Tests for the aggregated health report."""

    async def test_healthy(self):
        result = await _service().check_health()

        assert result.status == HealthStatus.HEALTHY
        assert result.service == "school-api"
        assert result.threads == 5

    async def test_unhealthy(self):
        result = await _service(database=False).check_health()

        assert result.status == HealthStatus.UNHEALTHY
        assert result.checks == {"database": False}
