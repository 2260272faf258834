"""Query resolvers for the post archive."""

from __future__ import annotations

import strawberry

from school_api.features.graphql.types.archive import Archive
from school_api.infra.metrics.prometheus import graphql_resource_requests_total


@strawberry.type
class ArchiveQuery:
    @strawberry.field(description="Access the post archive by year and month")
    def archive(self) -> Archive:
        graphql_resource_requests_total.labels(resource="archive").inc()
        return Archive()
