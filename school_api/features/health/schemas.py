"""Health check response schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthResponse(BaseModel):
    """Comprehensive health check response.

    Example:
        ```json
        {
            "status": "healthy",
            "timestamp": "2025-01-01T00:00:00Z",
            "service": "school-api",
            "version": "1.0.0",
            "checks": {"database": true, "redis": true}
        }
        ```
    """

    status: HealthStatus = Field(description="Overall health status")
    timestamp: datetime = Field(description="Check timestamp")
    service: str = Field(min_length=1, max_length=100, description="Service name")
    version: str = Field(min_length=1, max_length=50, description="Service version")
    checks: dict[str, bool] = Field(
        default_factory=dict, description="Individual dependency health checks"
    )
    threads: int = Field(ge=0, description="Threads in the process")

    model_config = ConfigDict(str_strip_whitespace=True)


class LivenessResponse(BaseModel):
    """Liveness probe response."""

    alive: bool = Field(description="Whether the process is below its thread limit")
    threads: int = Field(ge=0, description="Threads in the process")
    max_threads: int = Field(ge=1, description="Configured thread limit")


class ReadinessResponse(BaseModel):
    """Readiness probe response."""

    ready: bool = Field(description="Whether the service can accept traffic")
    checks: dict[str, bool] = Field(
        default_factory=dict, description="Dependency checks that gate readiness"
    )
