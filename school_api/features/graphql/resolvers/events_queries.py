"""Query resolvers for calendar events."""

from __future__ import annotations

from typing import Annotated

import strawberry
from strawberry.types import Info

from school_api.features.events.models import EVENT_PROJECTION
from school_api.features.events.service import list_events
from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields
from school_api.features.graphql.types.events import Event
from school_api.infra.metrics.prometheus import graphql_resource_requests_total


@strawberry.type
class EventsQuery:
    @strawberry.field(description="Events ending in the given month, ordered by start")
    async def events(
        self,
        info: Info[GraphQLContext, None],
        year: Annotated[int, strawberry.argument(description="The year")],
        month: Annotated[int, strawberry.argument(description="The month (1-12)")],
    ) -> list[Event]:
        graphql_resource_requests_total.labels(resource="events").inc()
        rows = await list_events(
            info.context.tx,
            columns=EVENT_PROJECTION.columns(requested_fields(info)),
            year=year,
            month=month,
        )
        return [Event.from_row(row) for row in rows]
