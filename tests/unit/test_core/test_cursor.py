"""Unit tests for the keyset cursor codec."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from school_api.core.exceptions import UserInputError
from school_api.core.pagination.cursor import (
    InvalidCursorDateError,
    MAX_CURSOR_ID,
    InvalidCursorIdError,
    KeysetCursor,
    MalformedCursorError,
    decode_optional,
    encode_cursor,
)


@pytest.mark.unit
class TestKeysetCursor:
    """Tests for cursor encoding and decoding."""

    def test_encode(self):
        """A cursor encodes as the ISO date and the id joined by '#'."""
        assert KeysetCursor(date(2020, 1, 31), 3).encode() == "2020-01-31#3"

    def test_encode_pads_date(self):
        assert encode_cursor(date(2021, 2, 3), 45) == "2021-02-03#45"

    def test_decode(self):
        cursor = KeysetCursor.decode("2020-01-31#3")

        assert cursor.date == date(2020, 1, 31)
        assert cursor.id == 3

    def test_decode_without_separator(self):
        """A string without '#' is rejected."""
        with pytest.raises(MalformedCursorError) as exc_info:
            KeysetCursor.decode("2020-01-31")

        assert exc_info.value.detail == "Wrong cursor format"

    @pytest.mark.parametrize("value", ["2020-13-01#1", "yesterday#1", "#1"])
    def test_decode_bad_date(self, value: str):
        with pytest.raises(InvalidCursorDateError) as exc_info:
            KeysetCursor.decode(value)

        assert exc_info.value.detail == "Wrong date format in cursor"

    @pytest.mark.parametrize(
        "value",
        [
            "2020-01-31#x",
            "2020-01-31#",
            "2020-01-31#-4",
            "2020-01-31#1#2",
            "2020-01-31#4294967296",
            "2020-01-31#99999999999999999999",
        ],
    )
    def test_decode_bad_id(self, value: str):
        with pytest.raises(InvalidCursorIdError) as exc_info:
            KeysetCursor.decode(value)

        assert exc_info.value.detail == "Invalid id in cursor"

    def test_decode_largest_id(self):
        assert KeysetCursor.decode("2020-01-31#4294967295").id == MAX_CURSOR_ID

    def test_cursor_errors_are_user_input(self):
        """Cursor errors are reported to clients as BAD_USER_INPUT."""
        with pytest.raises(UserInputError) as exc_info:
            KeysetCursor.decode("garbage")

        assert exc_info.value.code == "BAD_USER_INPUT"

    def test_ordering_by_date_then_id(self):
        older = KeysetCursor(date(2020, 1, 1), 9)
        newer = KeysetCursor(date(2020, 1, 2), 1)
        same_day_higher = KeysetCursor(date(2020, 1, 2), 5)

        assert older < newer < same_day_higher

    def test_from_row_accepts_datetime(self):
        """Rows from DATETIME columns are truncated to their date."""
        cursor = KeysetCursor.from_row({"date": datetime(2020, 5, 6, 7, 8), "id": 2})

        assert cursor == KeysetCursor(date(2020, 5, 6), 2)

    def test_decode_optional_none(self):
        assert decode_optional(None) is None
