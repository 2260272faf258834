"""GraphQL types for the navigation menu."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import strawberry
from strawberry.types import Info

from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields
from school_api.features.menu import service as menu_service
from school_api.features.menu.models import MENU_ITEM_PROJECTION
from school_api.features.pages.service import get_page_slug


@strawberry.type(description="A navigation menu item")
class MenuItem:
    name: str = strawberry.field(description="Display name of the menu item")
    type: str = strawberry.field(description="Item type (page_link, external_link...)")
    link: str | None = strawberry.field(description="External URL for link-type items")

    id: strawberry.Private[int]
    page_id: strawberry.Private[int | None]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> MenuItem:
        return cls(
            name=row.get("name"),
            type=row.get("type"),
            link=row.get("link"),
            id=row.get("id"),
            page_id=row.get("page_id"),
        )

    @strawberry.field(description="Slug of the linked page, for page-type items")
    async def slug(self, info: Info[GraphQLContext, None]) -> str | None:
        if self.page_id is None:
            return None
        return await get_page_slug(info.context.tx, self.page_id)

    @strawberry.field(description="Nested child menu items")
    async def children(self, info: Info[GraphQLContext, None]) -> list[MenuItem]:
        return await menu_items(info, parent_id=self.id)


async def menu_items(info: Info[GraphQLContext, None], parent_id: int | None = None) -> list[MenuItem]:
    rows = await menu_service.list_items(
        info.context.tx,
        columns=MENU_ITEM_PROJECTION.columns(requested_fields(info)),
        parent_id=parent_id,
    )
    return [MenuItem.from_row(row) for row in rows]
