"""Window query builder for keyset pagination.

A :class:`PageWindow` describes which slice of a ``(date, id)`` ordered
dataset a request asks for. It performs no I/O; :meth:`PageWindow.apply`
turns it into restrictions, ordering and a limit on a SQLAlchemy select.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from school_api.core.exceptions import UserInputError

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select

    from .cursor import KeysetCursor

Direction = Literal["asc", "desc"]


class PageArgumentError(UserInputError):
    """Invalid combination or value of first/last."""


@dataclass(frozen=True, slots=True)
class Keyset:
    """The two columns a dataset is ordered and cursored by."""

    date_column: Any
    id_column: Any

    def ascending(self) -> tuple[Any, Any]:
        return self.date_column.asc(), self.id_column.asc()

    def descending(self) -> tuple[Any, Any]:
        return self.date_column.desc(), self.id_column.desc()


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Requested page of a keyset-ordered dataset.

    Attributes:
        after: Only records after this cursor (``date >= d AND id > i``).
        before: Only records before this cursor (``date <= d AND id < i``).
        first: Fetch the oldest ``first`` matching records (ascending).
        last: Fetch the newest ``last`` matching records (descending).
    """

    after: KeysetCursor | None = None
    before: KeysetCursor | None = None
    first: int | None = None
    last: int | None = None

    def __post_init__(self) -> None:
        if self.first is not None and self.last is not None:
            msg = 'The "first" and "last" parameters cannot exist at the same time'
            raise PageArgumentError(msg)
        for name, value in (("first", self.first), ("last", self.last)):
            if value is not None and value < 0:
                msg = f'The "{name}" parameter must be a non-negative number'
                raise PageArgumentError(msg)

    @property
    def direction(self) -> Direction | None:
        if self.first is not None:
            return "asc"
        if self.last is not None:
            return "desc"
        return None

    @property
    def limit(self) -> int | None:
        return self.first if self.first is not None else self.last

    def conditions(self, keyset: Keyset) -> list[ColumnElement[bool]]:
        """Restrictions implied by the cursors, in before/after order."""
        clauses: list[ColumnElement[bool]] = []
        if self.before is not None:
            clauses.append(keyset.date_column <= self.before.date)
            clauses.append(keyset.id_column < self.before.id)
        if self.after is not None:
            clauses.append(keyset.date_column >= self.after.date)
            clauses.append(keyset.id_column > self.after.id)
        return clauses

    def apply(self, statement: Select[Any], keyset: Keyset) -> Select[Any]:
        """Return ``statement`` restricted, ordered and limited to this window."""
        clauses = self.conditions(keyset)
        if clauses:
            statement = statement.where(*clauses)

        if self.direction == "asc":
            statement = statement.order_by(*keyset.ascending())
        elif self.direction == "desc":
            statement = statement.order_by(*keyset.descending())

        if self.limit is not None:
            statement = statement.limit(self.limit)
        return statement
