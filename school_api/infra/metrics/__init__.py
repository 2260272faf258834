"""Prometheus metrics registry and collectors."""

from __future__ import annotations

from .prometheus import (
    REGISTRY,
    app_info,
    database_connections_active,
    database_errors_total,
    graphql_operation_duration_seconds,
    graphql_operations_total,
    graphql_persisted_queries_total,
    graphql_resource_requests_total,
)

__all__ = [
    "REGISTRY",
    "app_info",
    "database_connections_active",
    "database_errors_total",
    "graphql_operation_duration_seconds",
    "graphql_operations_total",
    "graphql_persisted_queries_total",
    "graphql_resource_requests_total",
]
