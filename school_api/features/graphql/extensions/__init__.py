"""Strawberry extensions for the GraphQL schema.

Provides:
- Query depth limiting
- Introspection switch
- Prometheus operation metrics
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from graphql.validation import NoSchemaIntrospectionCustomRule
from strawberry.extensions import AddValidationRules, QueryDepthLimiter

from .metrics import GraphQLMetricsExtension

if TYPE_CHECKING:
    from school_api.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)


def get_extensions(settings: GraphQLSettings) -> list[Any]:
    """Get list of Strawberry extensions for the schema.

    Returns:
        List of extension instances and classes
    """
    extensions: list[Any] = [
        QueryDepthLimiter(max_depth=settings.max_query_depth),
        GraphQLMetricsExtension,
    ]
    if not settings.introspection_enabled:
        extensions.append(AddValidationRules([NoSchemaIntrospectionCustomRule]))

    logger.debug(
        "GraphQL extensions configured",
        extra={
            "max_query_depth": settings.max_query_depth,
            "introspection_enabled": settings.introspection_enabled,
        },
    )
    return extensions


__all__ = ["GraphQLMetricsExtension", "get_extensions"]
