"""Column projection driven by the requested GraphQL fields.

Each entity declares a static table from output field name to the columns
that field needs. Resolvers pass the field names found in the query's
selection set and only those columns are selected.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


def _column_key(column: Any) -> str:
    return column.key


@dataclass(frozen=True, slots=True)
class ColumnProjection:
    """Static mapping of output fields to store columns.

    Attributes:
        fields: Output field name to the columns it reads. Fields computed
            without any column (e.g. nested connections) map to ``()``.
        required: Columns selected regardless of the request, such as the
            keys used for ordering, cursors and nested lookups.

    Example:
        AUTHOR_PROJECTION = ColumnProjection(
            fields={"name": (PostAuthor.name,), "posts": ()},
            required=(PostAuthor.id,),
        )
        stmt = select(*AUTHOR_PROJECTION.columns({"name"}))
    """

    fields: Mapping[str, tuple[Any, ...]]
    required: tuple[Any, ...] = field(default=())

    def columns(self, requested: Iterable[str] | None = None) -> list[Any]:
        """Return the deduplicated columns for a set of requested fields.

        Args:
            requested: Output field names, or None to select every mapped column.

        Returns:
            Required columns first, then requested ones in table order.
            Unknown field names contribute nothing.
        """
        wanted = set(self.fields) if requested is None else set(requested)

        chosen: dict[str, Any] = {}
        for column in self.required:
            chosen.setdefault(_column_key(column), column)
        for name, columns in self.fields.items():
            if name not in wanted:
                continue
            for column in columns:
                chosen.setdefault(_column_key(column), column)
        return list(chosen.values())
