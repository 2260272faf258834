"""Connection containers for cursor-based pagination (Relay pattern)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Pagination metadata.

    Attributes:
        has_previous_page: Older records exist beyond this page.
        has_next_page: Newer records exist beyond this page.
        start_cursor: Cursor of the first (newest) edge.
        end_cursor: Cursor of the last (oldest) edge.
    """

    has_previous_page: bool = False
    has_next_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    """A node and its cursor."""

    cursor: str
    node: T


@dataclass(frozen=True, slots=True)
class Connection(Generic[T]):
    """One page of results, newest first, plus navigation metadata."""

    edges: list[Edge[T]] = field(default_factory=list)
    page_info: PageInfo = field(default_factory=PageInfo)

    @property
    def nodes(self) -> list[T]:
        return [edge.node for edge in self.edges]

    @classmethod
    def empty(cls) -> Connection[T]:
        return cls()
