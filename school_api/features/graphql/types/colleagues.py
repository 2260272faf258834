"""GraphQL types for the staff directory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import strawberry
from strawberry.types import Info

from school_api.features.graphql.context import GraphQLContext

COLLEAGUES_IMAGES = "colleagues_images"


@strawberry.type(description="A staff member")
class Colleague:
    id: int
    name: str | None
    jobs: str | None
    subjects: str | None
    roles: str | None
    awards: str | None
    category: int | None

    image_path: strawberry.Private[str | None]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Colleague:
        return cls(
            id=row.get("id"),
            name=row.get("name"),
            jobs=row.get("jobs"),
            subjects=row.get("subjects"),
            roles=row.get("roles"),
            awards=row.get("awards"),
            category=row.get("category"),
            image_path=row.get("image"),
        )

    @strawberry.field(description="Portrait URL, if one was uploaded")
    def image(self, info: Info[GraphQLContext, None]) -> str | None:
        if not self.image_path:
            return None
        return info.context.storage_url(COLLEAGUES_IMAGES, self.image_path)
