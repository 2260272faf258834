"""Base GraphQL types for pagination and common arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from school_api.core.pagination import PageInfo

# Type aliases for annotated arguments with descriptions
AfterArg = Annotated[
    str | None, strawberry.argument(description="Return records after this cursor"),
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Return records before this cursor"),
]
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of oldest matching records to return"),
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of newest matching records to return"),
]
FeaturedArg = Annotated[
    bool, strawberry.argument(description="Filter to only featured posts"),
]


@strawberry.type(name="PageInfo", description="Pagination metadata following GraphQL Relay specification")
class PageInfoType:
    """Relay PageInfo.

    Mirrors school_api.core.pagination.schemas.PageInfo.
    """

    has_previous_page: bool = strawberry.field(description="Whether older records exist")
    has_next_page: bool = strawberry.field(description="Whether newer records exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first (newest) edge",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last (oldest) edge",
    )

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> PageInfoType:
        return cls(
            has_previous_page=page_info.has_previous_page,
            has_next_page=page_info.has_next_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        )


__all__ = [
    "AfterArg",
    "BeforeArg",
    "FeaturedArg",
    "FirstArg",
    "LastArg",
    "PageInfoType",
]
