"""GraphQL types for CMS pages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import strawberry
from strawberry.scalars import JSON


@strawberry.type(description="A CMS page")
class Page:
    id: int
    template: str = strawberry.field(description="Template the page is rendered with")
    name: str = strawberry.field(description="Internal page name")
    title: str = strawberry.field(description="Page title")
    content: str = strawberry.field(description="Page body")
    extras: JSON | None = strawberry.field(description="Template-specific fields")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Page:
        return cls(
            id=row.get("id"),
            template=row.get("template"),
            name=row.get("name"),
            title=row.get("title"),
            content=row.get("content"),
            extras=row.get("extras"),
        )
