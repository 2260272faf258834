"""Query resolvers for the staff directory."""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from school_api.features.colleagues.models import COLLEAGUE_PROJECTION
from school_api.features.colleagues.service import list_colleagues
from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields
from school_api.features.graphql.types.colleagues import Colleague
from school_api.infra.metrics.prometheus import graphql_resource_requests_total


@strawberry.type
class ColleaguesQuery:
    @strawberry.field(description='All colleagues, sorted by name ignoring a leading "Dr. "')
    async def colleagues(self, info: Info[GraphQLContext, None]) -> list[Colleague]:
        graphql_resource_requests_total.labels(resource="colleagues").inc()
        rows = await list_colleagues(
            info.context.tx,
            columns=COLLEAGUE_PROJECTION.columns(requested_fields(info)),
        )
        return [Colleague.from_row(row) for row in rows]
