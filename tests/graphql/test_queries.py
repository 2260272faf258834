"""GraphQL tests for pages, colleagues, canteen, events, menu and archive."""

from __future__ import annotations

import pytest

from school_api.features.graphql.errors import format_graphql_errors
from tests.conftest import STORAGE


@pytest.mark.graphql
class TestPage:
    """Tests for the page lookup."""

    async def test_page_by_slug(self, execute):
        result = await execute('{ page(slug: "about") { id template name title content extras } }')

        assert result.errors is None
        assert result.data["page"] == {
            "id": 1,
            "template": "default",
            "name": "about",
            "title": "About us",
            "content": "<p>Our school</p>",
            "extras": {"header": "big"},
        }

    async def test_soft_deleted_page_hidden(self, execute):
        result = await execute('{ page(slug: "old") { id } }')

        assert result.data == {"page": None}

    async def test_unknown_slug(self, execute):
        result = await execute('{ page(slug: "nope") { id } }')

        assert result.data == {"page": None}


@pytest.mark.graphql
class TestColleagues:
    """Tests for the staff directory."""

    async def test_sorted_ignoring_title(self, execute):
        result = await execute("{ colleagues { name } }")

        assert [colleague["name"] for colleague in result.data["colleagues"]] == [
            None,
            "Anna Nagy",
            "Dr. Bela Kiss",
            "Csaba Toth",
        ]

    async def test_image_url(self, execute):
        result = await execute("{ colleagues { id jobs category image } }")

        by_id = {colleague["id"]: colleague for colleague in result.data["colleagues"]}
        assert by_id[1] == {
            "id": 1,
            "jobs": "Principal",
            "category": 1,
            "image": f"{STORAGE}/colleagues_images/bela.jpg",
        }
        assert by_id[2]["image"] is None


@pytest.mark.graphql
class TestCanteen:
    """Tests for the canteen week."""

    async def test_week(self, execute):
        result = await execute("{ canteen(year: 2024, week: 10) { date menus { menu type } } }")

        assert result.errors is None
        assert result.data["canteen"] == [
            {"date": "2024-03-04", "menus": [{"menu": "Pasta", "type": 2}]},
            {
                "date": "2024-03-05",
                "menus": [{"menu": "Soup", "type": 1}, {"menu": "Cake", "type": 3}],
            },
        ]

    async def test_empty_week(self, execute):
        result = await execute("{ canteen(year: 2023, week: 10) { id } }")

        assert result.data == {"canteen": []}

    async def test_invalid_week(self, execute):
        result = await execute("{ canteen(year: 2024, week: 54) { id } }")

        assert result.data is None
        assert result.errors[0].message == "invalid date"
        assert format_graphql_errors(result.errors)[0]["extensions"]["code"] == "BAD_USER_INPUT"


@pytest.mark.graphql
class TestEvents:
    """Tests for the monthly events."""

    async def test_events_ending_in_month(self, execute):
        result = await execute(
            "{ events(year: 2024, month: 3) { id title dateFrom dateTo color description } }"
        )

        assert result.errors is None
        assert result.data["events"] == [
            {
                "id": 1,
                "title": "Ski camp",
                "dateFrom": "2024-02-28T09:00:00",
                "dateTo": "2024-03-02T17:00:00",
                "color": "blue",
                "description": None,
            },
            {
                "id": 2,
                "title": "Science fair",
                "dateFrom": "2024-03-10T08:00:00",
                "dateTo": "2024-03-10T12:00:00",
                "color": None,
                "description": None,
            },
        ]

    async def test_next_month(self, execute):
        result = await execute("{ events(year: 2024, month: 4) { id } }")

        assert result.data == {"events": [{"id": 3}]}

    async def test_invalid_month(self, execute):
        result = await execute("{ events(year: 2024, month: 13) { id } }")

        assert result.errors[0].message == "invalid date"


@pytest.mark.graphql
class TestMenu:
    """Tests for the navigation menu."""

    async def test_tree(self, execute):
        result = await execute(
            "{ menu { name type link slug children { name slug children { name } } } }"
        )

        assert result.errors is None
        assert result.data["menu"] == [
            {"name": "Home", "type": "page_link", "link": None, "slug": "about", "children": []},
            {
                "name": "School",
                "type": "external_link",
                "link": "https://example.org",
                "slug": None,
                "children": [{"name": "About", "slug": "about", "children": []}],
            },
        ]


@pytest.mark.graphql
class TestArchive:
    """Tests for the post archive."""

    async def test_info(self, execute):
        result = await execute("{ archive { info { count year month } } }")

        assert result.errors is None
        assert result.data["archive"]["info"] == [
            {"count": 2, "year": 2024, "month": 3},
            {"count": 1, "year": 2024, "month": 2},
            {"count": 1, "year": 2024, "month": 1},
        ]

    async def test_posts_of_month(self, execute):
        result = await execute("{ archive { posts(year: 2024, month: 3) { id title } } }")

        assert result.data["archive"]["posts"] == [
            {"id": 5, "title": "Open day"},
            {"id": 4, "title": "Spring_break"},
        ]

    async def test_drafts_excluded(self, execute):
        result = await execute("{ archive { posts(year: 2024, month: 2) { id } } }")

        assert result.data["archive"]["posts"] == [{"id": 2}]

    async def test_invalid_month(self, execute):
        result = await execute("{ archive { posts(year: 2024, month: 0) { id } } }")

        assert result.errors[0].message == "invalid date"
