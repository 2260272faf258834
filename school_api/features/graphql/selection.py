"""Requested-field extraction from strawberry's ``info.selected_fields``.

Field names are returned as written in the query (camelCase), with
fragment spreads and inline fragments flattened.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from strawberry.types.nodes import SelectedField

if TYPE_CHECKING:
    from strawberry.types import Info


def _fields(selections: Iterable[Any]) -> Iterator[SelectedField]:
    for selection in selections:
        if isinstance(selection, SelectedField):
            yield selection
        else:
            # FragmentSpread / InlineFragment
            yield from _fields(selection.selections)


def _children(fields: Iterable[SelectedField], name: str) -> Iterator[SelectedField]:
    for selected in fields:
        for child in _fields(selected.selections):
            if child.name == name:
                yield child


def requested_fields(info: Info) -> set[str]:
    """Names of the fields selected directly under the current field."""
    return {child.name for child in _fields(_selections(info))}


def connection_node_fields(info: Info) -> set[str]:
    """Names selected on the nodes of a connection field.

    Collects both ``edges { node { ... } }`` and ``nodes { ... }``.
    """
    roots = list(info.selected_fields)
    nodes = [*_children(_children(roots, "edges"), "node"), *_children(roots, "nodes")]
    return {child.name for node in nodes for child in _fields(node.selections)}


def _selections(info: Info) -> list[Any]:
    return [selection for root in info.selected_fields for selection in root.selections]


__all__ = ["connection_node_fields", "requested_fields"]
