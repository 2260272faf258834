"""GraphQL schema assembly.

Merges the per-feature query types into the root Query and attaches the
configured extensions. The schema is read-only: no mutations or
subscriptions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import strawberry
from strawberry.tools import merge_types

from school_api.core.settings import get_graphql_settings
from school_api.features.graphql.errors import log_graphql_errors
from school_api.features.graphql.extensions import get_extensions
from school_api.features.graphql.resolvers import QUERY_TYPES

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

    from school_api.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)

Query = merge_types("Query", QUERY_TYPES)


class SchoolSchema(strawberry.Schema):
    """Schema that logs errors through the application's error classifier."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        log_graphql_errors(errors, execution_context)


def build_schema(settings: GraphQLSettings | None = None, **kwargs: Any) -> SchoolSchema:
    """Build the schema with extensions from ``settings``."""
    settings = settings or get_graphql_settings()
    return SchoolSchema(query=Query, extensions=get_extensions(settings), **kwargs)


schema = build_schema()

logger.debug("GraphQL schema created")

__all__ = ["Query", "SchoolSchema", "build_schema", "schema"]
