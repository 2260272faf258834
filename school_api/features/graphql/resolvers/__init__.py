"""Root query types, one per feature, merged into the schema's Query."""

from __future__ import annotations

from .archive_queries import ArchiveQuery
from .canteen_queries import CanteenQuery
from .colleagues_queries import ColleaguesQuery
from .events_queries import EventsQuery
from .menu_queries import MenuQuery
from .pages_queries import PagesQuery
from .posts_queries import PostsQuery

QUERY_TYPES: tuple[type, ...] = (
    PostsQuery,
    PagesQuery,
    ColleaguesQuery,
    CanteenQuery,
    EventsQuery,
    MenuQuery,
    ArchiveQuery,
)

__all__ = [
    "QUERY_TYPES",
    "ArchiveQuery",
    "CanteenQuery",
    "ColleaguesQuery",
    "EventsQuery",
    "MenuQuery",
    "PagesQuery",
    "PostsQuery",
]
