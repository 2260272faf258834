"""Prometheus metrics extension for GraphQL operations.

Usage:
    from school_api.features.graphql.extensions.metrics import GraphQLMetricsExtension

    extensions = [
        GraphQLMetricsExtension,
    ]
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator

from strawberry.extensions import SchemaExtension

from school_api.infra.metrics.prometheus import (
    graphql_operation_duration_seconds,
    graphql_operations_total,
)

logger = logging.getLogger(__name__)

__all__ = ["GraphQLMetricsExtension"]


class GraphQLMetricsExtension(SchemaExtension):
    """Record count, outcome and duration of every GraphQL operation."""

    def on_operation(self) -> Iterator[None]:
        start = time.perf_counter()
        yield
        duration = time.perf_counter() - start

        execution_context = self.execution_context
        operation_name = execution_context.operation_name or "anonymous"

        errors = getattr(execution_context.result, "errors", None) or getattr(
            execution_context, "pre_execution_errors", None
        )
        status = "error" if errors else "success"

        graphql_operation_duration_seconds.labels(operation_name=operation_name).observe(duration)
        graphql_operations_total.labels(operation_name=operation_name, status=status).inc()
