"""Unit tests for the page window query builder."""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import select

from school_api.core.pagination.cursor import KeysetCursor
from school_api.core.pagination.window import Keyset, PageArgumentError, PageWindow
from school_api.features.posts.models import PostData

KEYSET = Keyset(PostData.date, PostData.id)


def _compile(window: PageWindow):
    statement = window.apply(select(PostData.id), KEYSET)
    compiled = statement.compile()
    return str(compiled), compiled.params


@pytest.mark.unit
class TestPageWindowValidation:
    """Tests for first/last validation."""

    def test_first_and_last_together(self):
        with pytest.raises(PageArgumentError) as exc_info:
            PageWindow(first=1, last=1)

        assert exc_info.value.detail == 'The "first" and "last" parameters cannot exist at the same time'

    @pytest.mark.parametrize("name", ["first", "last"])
    def test_negative_size(self, name: str):
        with pytest.raises(PageArgumentError) as exc_info:
            PageWindow(**{name: -1})

        assert exc_info.value.detail == f'The "{name}" parameter must be a non-negative number'

    def test_zero_is_allowed(self):
        assert PageWindow(first=0).limit == 0


@pytest.mark.unit
class TestPageWindowApply:
    """Tests for the SQL produced by a window."""

    def test_no_arguments_adds_nothing(self):
        sql, params = _compile(PageWindow())

        assert "WHERE" not in sql
        assert "ORDER BY" not in sql
        assert "LIMIT" not in sql
        assert params == {}

    def test_first_orders_ascending(self):
        sql, params = _compile(PageWindow(first=10))

        assert "WHERE" not in sql
        assert "ORDER BY posts_data.date ASC, posts_data.id ASC" in sql
        assert "LIMIT" in sql
        assert 10 in params.values()

    def test_last_orders_descending(self):
        sql, params = _compile(PageWindow(last=2))

        assert "WHERE" not in sql
        assert "ORDER BY posts_data.date DESC, posts_data.id DESC" in sql
        assert 2 in params.values()

    def test_after_cursor(self):
        """after adds date >= d AND id > i."""
        sql, params = _compile(PageWindow(after=KeysetCursor(date(2020, 1, 31), 3), first=1))

        assert "WHERE posts_data.date >= :date_1 AND posts_data.id > :id_1" in sql
        assert params["date_1"] == date(2020, 1, 31)
        assert params["id_1"] == 3

    def test_before_cursor(self):
        """before adds date <= d AND id < i."""
        sql, params = _compile(PageWindow(before=KeysetCursor(date(2020, 1, 31), 7), last=1))

        assert "WHERE posts_data.date <= :date_1 AND posts_data.id < :id_1" in sql
        assert params["date_1"] == date(2020, 1, 31)
        assert params["id_1"] == 7

    def test_both_cursors(self):
        window = PageWindow(
            after=KeysetCursor(date(2020, 1, 1), 1),
            before=KeysetCursor(date(2020, 2, 1), 9),
        )

        assert len(window.conditions(KEYSET)) == 4
        assert window.direction is None
        assert window.limit is None
