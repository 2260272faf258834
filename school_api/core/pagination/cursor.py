"""Keyset cursor codec.

A cursor is the opaque string ``"YYYY-MM-DD#<id>"`` naming a position in a
result set ordered by ``(date, id)``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from school_api.core.exceptions import UserInputError

DATE_FORMAT = "%Y-%m-%d"
SEPARATOR = "#"

MAX_CURSOR_ID = 2**32 - 1

_ID_PATTERN = re.compile(r"[0-9]{1,10}")


class CursorError(UserInputError):
    """A client-supplied cursor cannot be decoded."""


class MalformedCursorError(CursorError):
    def __init__(self) -> None:
        super().__init__("Wrong cursor format")


class InvalidCursorDateError(CursorError):
    def __init__(self) -> None:
        super().__init__("Wrong date format in cursor")


class InvalidCursorIdError(CursorError):
    def __init__(self) -> None:
        super().__init__("Invalid id in cursor")


@dataclass(frozen=True, slots=True, order=True)
class KeysetCursor:
    """Position ``(date, id)`` in a keyset-ordered result.

    Field order defines the sort order: by date, then by id within a date.
    """

    date: date
    id: int

    def encode(self) -> str:
        return f"{self.date.strftime(DATE_FORMAT)}{SEPARATOR}{self.id}"

    @classmethod
    def decode(cls, value: str) -> KeysetCursor:
        """Parse a cursor string.

        Raises:
            MalformedCursorError: The separator is missing.
            InvalidCursorDateError: The date part is not ``YYYY-MM-DD``.
            InvalidCursorIdError: The id part is not an unsigned 32-bit integer.
        """
        date_part, sep, id_part = value.partition(SEPARATOR)
        if not sep:
            raise MalformedCursorError

        try:
            parsed_date = datetime.strptime(date_part, DATE_FORMAT).date()
        except ValueError as exc:
            raise InvalidCursorDateError from exc

        if not _ID_PATTERN.fullmatch(id_part) or int(id_part) > MAX_CURSOR_ID:
            raise InvalidCursorIdError

        return cls(parsed_date, int(id_part))

    @classmethod
    def from_row(cls, row: Any) -> KeysetCursor:
        """Build the cursor of a fetched row exposing ``date`` and ``id``."""
        return cls(_as_date(row["date"]), row["id"])


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def encode_cursor(day: date, ident: int) -> str:
    return KeysetCursor(day, ident).encode()


def decode_cursor(value: str) -> KeysetCursor:
    return KeysetCursor.decode(value)


def decode_optional(value: str | None) -> KeysetCursor | None:
    if value is None:
        return None
    return KeysetCursor.decode(value)
