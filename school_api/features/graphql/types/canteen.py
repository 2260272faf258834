"""GraphQL types for canteen menus."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any

import strawberry
from strawberry.types import Info

from school_api.features.canteen import service as canteen_service
from school_api.features.canteen.models import MENU_PROJECTION
from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields


@strawberry.type(description="A canteen menu item")
class Menu:
    id: int = strawberry.field(description="Unique identifier")
    menu: str = strawberry.field(description="Menu item description")
    type: int = strawberry.field(description="Course identifier (soup, main course, dessert...)")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Menu:
        return cls(id=row.get("id"), menu=row.get("menu"), type=row.get("type"))


@strawberry.type(description="A day's canteen information")
class Canteen:
    id: int = strawberry.field(description="Unique identifier")
    date: dt.date = strawberry.field(description="The day these menus are served")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Canteen:
        return cls(id=row.get("id"), date=row.get("date"))

    @strawberry.field(description="Menus served on this day")
    async def menus(self, info: Info[GraphQLContext, None]) -> list[Menu]:
        rows = await canteen_service.menus_for_day(
            info.context.tx,
            columns=MENU_PROJECTION.columns(requested_fields(info)),
            day_id=self.id,
        )
        return [Menu.from_row(row) for row in rows]
