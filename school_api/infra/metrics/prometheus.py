"""Prometheus metrics for the GraphQL service."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram

# Service registry exposed on /metrics
REGISTRY = CollectorRegistry()

# Covers response times from 1ms to 10s
DEFAULT_LATENCY_BUCKETS = (
    0.001,
    0.005,
    0.01,
    0.025,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
)

# GraphQL metrics
graphql_resource_requests_total = Counter(
    "graphql_resource_requests_total",
    "Total root field resolutions by requested resource",
    ["resource"],
    registry=REGISTRY,
)

graphql_operations_total = Counter(
    "graphql_operations_total",
    "Total GraphQL operations executed",
    ["operation_name", "status"],
    registry=REGISTRY,
)

graphql_operation_duration_seconds = Histogram(
    "graphql_operation_duration_seconds",
    "GraphQL operation duration in seconds",
    ["operation_name"],
    buckets=DEFAULT_LATENCY_BUCKETS,
    registry=REGISTRY,
)

graphql_persisted_queries_total = Counter(
    "graphql_persisted_queries_total",
    "Persisted query cache lookups and stores",
    ["result"],
    registry=REGISTRY,
)

# Database metrics
database_errors_total = Counter(
    "database_errors_total",
    "Total failed database operations",
    ["operation"],
    registry=REGISTRY,
)

database_connections_active = Gauge(
    "database_connections_active",
    "Number of open database connections",
    registry=REGISTRY,
)

# Application metrics
app_info = Gauge(
    "app_info",
    "Application build information",
    ["version", "environment"],
    registry=REGISTRY,
)
