"""Boundary detection and connection assembly."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .bounds import KeysetBounds
from .cursor import KeysetCursor
from .schemas import Connection, Edge, PageInfo


def page_flags(newest: KeysetCursor, oldest: KeysetCursor, bounds: KeysetBounds) -> tuple[bool, bool]:
    """Compute ``(has_previous_page, has_next_page)`` for a non-empty window.

    Args:
        newest: Key of the window's first record in presentation order.
        oldest: Key of the window's last record in presentation order.
        bounds: Global bounds of the eligible dataset.
    """
    has_previous = bounds.minimum <= oldest and bounds.minimum.id != oldest.id
    has_next = bounds.maximum >= newest and bounds.maximum.id != newest.id
    return has_previous, has_next


def assemble_connection(
    rows: Sequence[Mapping[str, Any]],
    bounds: KeysetBounds | None,
) -> Connection[Mapping[str, Any]]:
    """Package a fetched window into a newest-first connection.

    Args:
        rows: Records of the window, in any order, each exposing ``date`` and ``id``.
        bounds: Global bounds, only consulted when ``rows`` is non-empty.

    Returns:
        Connection whose edges are sorted descending by ``(date, id)``.

    Raises:
        ValueError: ``rows`` is non-empty but no bounds were given.
    """
    if not rows:
        return Connection.empty()
    if bounds is None:
        msg = "bounds are required for a non-empty window"
        raise ValueError(msg)

    keyed = sorted(
        ((KeysetCursor.from_row(row), row) for row in rows),
        key=lambda pair: pair[0],
        reverse=True,
    )
    newest, oldest = keyed[0][0], keyed[-1][0]
    has_previous, has_next = page_flags(newest, oldest, bounds)

    edges = [Edge(cursor=key.encode(), node=row) for key, row in keyed]
    return Connection(
        edges=edges,
        page_info=PageInfo(
            has_previous_page=has_previous,
            has_next_page=has_next,
            start_cursor=edges[0].cursor,
            end_cursor=edges[-1].cursor,
        ),
    )
