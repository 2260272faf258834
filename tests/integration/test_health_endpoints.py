"""Integration tests for the probe endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from school_api.core.settings import AppSettings, HealthSettings, RedisSettings
from school_api.features.health.service import HealthService, get_health_service


def _override(app, *, database: bool = True, threads: int = 3, max_threads: int = 100) -> None:
    async def database_check(timeout: float) -> bool:
        return database

    app.dependency_overrides[get_health_service] = lambda: HealthService(
        HealthSettings(max_threads=max_threads),
        AppSettings(),
        RedisSettings(),
        database_check=database_check,
        cache_getter=lambda: None,
        thread_counter=lambda: threads,
    )


@pytest.mark.integration
class TestProbes:
    """Tests for /liveness, /readiness and /health."""

    async def test_liveness(self, app, client: AsyncClient):
        _override(app)

        response = await client.get("/liveness")

        assert response.status_code == 200
        assert response.json() == {"alive": True, "threads": 3, "max_threads": 100}

    async def test_liveness_thread_limit(self, app, client: AsyncClient):
        _override(app, threads=100)

        response = await client.get("/liveness")

        assert response.status_code == 500
        assert response.json()["alive"] is False

    async def test_readiness(self, app, client: AsyncClient):
        _override(app)

        response = await client.get("/readiness")

        assert response.status_code == 200
        assert response.json() == {"ready": True, "checks": {"database": True}}

    async def test_readiness_database_down(self, app, client: AsyncClient):
        _override(app, database=False)

        response = await client.get("/readiness")

        assert response.status_code == 503
        assert response.json()["ready"] is False

    async def test_readiness_without_engine(self, client: AsyncClient):
        """Without an initialized engine the database check fails instead of raising."""
        response = await client.get("/readiness")

        assert response.status_code == 503

    async def test_health(self, app, client: AsyncClient):
        _override(app)

        response = await client.get("/health")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["service"] == "school-api"
        assert data["checks"] == {"database": True}
        assert isinstance(data["timestamp"], str)
