"""Query resolvers for the navigation menu."""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.types.menu import MenuItem, menu_items
from school_api.infra.metrics.prometheus import graphql_resource_requests_total


@strawberry.type
class MenuQuery:
    @strawberry.field(description="Top-level navigation menu items; nested items via children")
    async def menu(self, info: Info[GraphQLContext, None]) -> list[MenuItem]:
        graphql_resource_requests_total.labels(resource="menu").inc()
        return await menu_items(info)
