"""Keyset pagination over ``(date, id)`` ordered datasets.

Pieces, leaves first:
    - cursor: ``"YYYY-MM-DD#<id>"`` codec
    - window: first/last/after/before to SQL restrictions, order and limit
    - bounds: global min/max of the eligible dataset
    - connection: page flags and newest-first edges
    - paginator: the facade resolvers call
"""

from __future__ import annotations

from .bounds import BoundsNotFoundError, KeysetBounds, fetch_bounds
from .connection import assemble_connection, page_flags
from .cursor import (
    CursorError,
    InvalidCursorDateError,
    InvalidCursorIdError,
    KeysetCursor,
    MalformedCursorError,
    decode_cursor,
    encode_cursor,
)
from .paginator import KeysetPaginator, resolve_page_size
from .schemas import Connection, Edge, PageInfo
from .window import Keyset, PageArgumentError, PageWindow

__all__ = [
    "BoundsNotFoundError",
    "Connection",
    "CursorError",
    "Edge",
    "InvalidCursorDateError",
    "InvalidCursorIdError",
    "Keyset",
    "KeysetBounds",
    "KeysetCursor",
    "KeysetPaginator",
    "MalformedCursorError",
    "PageArgumentError",
    "PageInfo",
    "PageWindow",
    "assemble_connection",
    "decode_cursor",
    "encode_cursor",
    "fetch_bounds",
    "page_flags",
    "resolve_page_size",
]
