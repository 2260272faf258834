"""Query resolvers for CMS pages."""

from __future__ import annotations

from typing import Annotated

import strawberry
from strawberry.types import Info

from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields
from school_api.features.graphql.types.pages import Page
from school_api.features.pages.models import PAGE_PROJECTION
from school_api.features.pages.service import get_page_by_slug
from school_api.infra.metrics.prometheus import graphql_resource_requests_total


@strawberry.type
class PagesQuery:
    @strawberry.field(description="Retrieve a page by its slug")
    async def page(
        self,
        info: Info[GraphQLContext, None],
        slug: Annotated[str, strawberry.argument(description="URL slug of the page")],
    ) -> Page | None:
        graphql_resource_requests_total.labels(resource="page").inc()
        row = await get_page_by_slug(
            info.context.tx,
            columns=PAGE_PROJECTION.columns(requested_fields(info)),
            slug=slug,
        )
        return Page.from_row(row) if row is not None else None
