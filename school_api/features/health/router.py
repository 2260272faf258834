"""Health check API endpoints.

Provides probe endpoints at the application root:
- /liveness: is the process below its thread limit?
- /readiness: do the database (and Redis, when configured) answer?
- /health: JSON report of every dependency check
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from school_api.features.health.schemas import HealthResponse, LivenessResponse, ReadinessResponse

# Import dependencies at runtime so FastAPI treats them as Depends()
from school_api.features.health.service import HealthServiceDep  # noqa: TC001

router = APIRouter(tags=["health"])


@router.get(
    "/liveness",
    response_model=LivenessResponse,
    responses={500: {"description": "Thread limit reached"}},
    summary="Liveness probe",
)
async def liveness_check(response: Response, service: HealthServiceDep) -> LivenessResponse:
    """Return 200 while the process thread count is below ``HEALTH_MAX_THREADS``."""
    result = service.check_liveness()
    if not result.alive:
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return result


@router.get(
    "/readiness",
    response_model=ReadinessResponse,
    responses={503: {"description": "Service not ready to accept traffic"}},
    summary="Readiness probe",
)
async def readiness_check(response: Response, service: HealthServiceDep) -> ReadinessResponse:
    """Return 200 when the database answers ``SELECT 1`` and Redis answers PING."""
    result = await service.check_readiness()
    if not result.ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Comprehensive health check",
)
async def health_check(service: HealthServiceDep) -> HealthResponse:
    """Overall health with per-dependency results."""
    return await service.check_health()
