"""Query resolvers for canteen menus."""

from __future__ import annotations

from typing import Annotated

import strawberry
from strawberry.types import Info

from school_api.features.canteen.models import CANTEEN_PROJECTION
from school_api.features.canteen.service import list_week
from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields
from school_api.features.graphql.types.canteen import Canteen
from school_api.infra.metrics.prometheus import graphql_resource_requests_total


@strawberry.type
class CanteenQuery:
    @strawberry.field(description="Canteen menus for each day of an ISO week, Monday to Sunday")
    async def canteen(
        self,
        info: Info[GraphQLContext, None],
        year: Annotated[int, strawberry.argument(description="The ISO year")],
        week: Annotated[int, strawberry.argument(description="The ISO week number (1-53)")],
    ) -> list[Canteen]:
        graphql_resource_requests_total.labels(resource="canteen").inc()
        rows = await list_week(
            info.context.tx,
            columns=CANTEEN_PROJECTION.columns(requested_fields(info)),
            year=year,
            week=week,
        )
        return [Canteen.from_row(row) for row in rows]
