"""GraphQL types for calendar events."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any

import strawberry


@strawberry.type(description="A calendar event")
class Event:
    id: int
    date_from: dt.datetime = strawberry.field(description="Start of the event")
    date_to: dt.datetime = strawberry.field(description="End of the event")
    title: str
    description: str | None
    color: str | None = strawberry.field(description="Display color")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Event:
        return cls(
            id=row.get("id"),
            date_from=row.get("date_from"),
            date_to=row.get("date_to"),
            title=row.get("title"),
            description=row.get("description"),
            color=row.get("color"),
        )
