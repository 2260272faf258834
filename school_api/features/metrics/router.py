"""Prometheus metrics endpoint.

Endpoints:
    GET /metrics - Prometheus scrape endpoint

Metrics Exposed:
    GraphQL Metrics:
        - graphql_resource_requests_total - Root field resolutions by resource
        - graphql_operations_total - Operations by name and outcome
        - graphql_operation_duration_seconds - Operation latency histogram
        - graphql_persisted_queries_total - Persisted query hits, misses and stores

    Database Metrics:
        - database_errors_total - Failed statements by operation
        - database_connections_active - Open pool connections

    Application Info:
        - app_info - Service version and environment labels
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from school_api.infra.metrics.prometheus import REGISTRY

router = APIRouter(tags=["observability"])


@router.get("/metrics")
async def metrics() -> Response:
    """Expose the service registry in the Prometheus text format."""
    data = generate_latest(REGISTRY)
    return Response(
        content=data,
        media_type=CONTENT_TYPE_LATEST,
        headers={"Cache-Control": "no-cache, no-store, must-revalidate"},
    )
