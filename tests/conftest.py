"""Pytest configuration and shared fixtures.

Organization:
    - Database Fixtures: in-memory SQLite engine seeded with CMS content
    - GraphQL Fixtures: request transaction, context and an execute helper
    - Cache Fixtures: in-memory stand-in for the Redis cache
    - Application Fixtures: FastAPI app with overridden dependencies and HTTP client
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from datetime import date, datetime
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("APP_STORAGE_BASE_URL", "https://cdn.test/storage")
os.environ.setdefault("LOG_JSON_LOGS", "false")
os.environ.pop("REDIS_URL", None)
os.environ.pop("DATABASE_URL", None)

from school_api.core.database import Base, request_transaction  # noqa: E402
from school_api.features.canteen.models import (  # noqa: E402
    CanteenDay,
    CanteenMenu,
    canteen_pivot_menus_data,
)
from school_api.features.colleagues.models import Colleague  # noqa: E402
from school_api.features.events.models import Event  # noqa: E402
from school_api.features.graphql.context import GraphQLContext  # noqa: E402
from school_api.features.menu.models import MenuItem  # noqa: E402
from school_api.features.pages.models import Page  # noqa: E402
from school_api.features.posts.models import (  # noqa: E402
    PostAuthor,
    PostData,
    PostLabel,
    posts_pivot_labels_data,
)

STORAGE = "https://cdn.test/storage"


# ============================================================================
# Database Fixtures
# ============================================================================


def _seed_rows() -> list[Any]:
    """CMS content shared by the query tests.

    Published posts, newest first: 5, 4, 2, 1. Post 3 is an unpublished
    draft with preview token "secret".
    """
    return [
        PostAuthor(id=1, name="Jane Doe", description="Music teacher", image="jane.png"),
        PostAuthor(id=2, name="John Roe", description=None, image=None),
        PostLabel(id=1, name="News", color="#ff0000"),
        PostLabel(id=2, name="Sport", color="#00ff00"),
        PostData(
            id=1,
            title="Winter concert",
            color="blue",
            description="Concert",
            content="The choir sings 100% live",
            index_image="p1.jpg",
            author_id=1,
            images=["a.jpg", "b.jpg"],
            date=date(2024, 1, 10),
            published=True,
            featured=True,
        ),
        PostData(
            id=2,
            title="Football cup",
            color="green",
            description="Cup final",
            content="We won the cup",
            index_image="p2.jpg",
            author_id=2,
            images={"first": "c.jpg"},
            date=date(2024, 2, 5),
            published=True,
            featured=False,
        ),
        PostData(
            id=3,
            title="Draft",
            color="grey",
            description=None,
            content="Not ready yet",
            index_image="p3.jpg",
            author_id=1,
            images=[],
            date=date(2024, 2, 20),
            published=False,
            featured=False,
            preview_token="secret",
        ),
        PostData(
            id=4,
            title="Spring_break",
            color="yellow",
            description="Holiday",
            content="No lessons for a week",
            index_image=None,
            author_id=1,
            images=None,
            date=date(2024, 3, 1),
            published=True,
            featured=True,
        ),
        PostData(
            id=5,
            title="Open day",
            color="red",
            description="Visit us",
            content="Doors open at nine",
            index_image="p5.jpg",
            author_id=2,
            images='["d.jpg"]',
            date=date(2024, 3, 15),
            published=True,
            featured=False,
        ),
        Page(
            id=1,
            template="default",
            name="about",
            title="About us",
            slug="about",
            content="<p>Our school</p>",
            extras={"header": "big"},
        ),
        Page(
            id=2,
            template="default",
            name="old",
            title="Old page",
            slug="old",
            content="gone",
            extras=None,
            deleted_at=datetime(2023, 5, 1),
        ),
        Colleague(id=1, name="Dr. Bela Kiss", jobs="Principal", image="bela.jpg", category=1),
        Colleague(id=2, name="Anna Nagy", jobs="Teacher", image=None, category=2),
        Colleague(id=3, name="Csaba Toth", jobs="Teacher", image=None, category=2),
        Colleague(id=4, name=None, jobs="Caretaker", image=None, category=3),
        CanteenDay(id=1, date=date(2024, 3, 5)),
        CanteenDay(id=2, date=date(2024, 3, 4)),
        CanteenDay(id=3, date=date(2024, 3, 11)),
        CanteenMenu(id=1, menu="Soup", type=1),
        CanteenMenu(id=2, menu="Pasta", type=2),
        CanteenMenu(id=3, menu="Cake", type=3),
        Event(
            id=1,
            date_from=datetime(2024, 2, 28, 9, 0),
            date_to=datetime(2024, 3, 2, 17, 0),
            title="Ski camp",
            color="blue",
        ),
        Event(
            id=2,
            date_from=datetime(2024, 3, 10, 8, 0),
            date_to=datetime(2024, 3, 10, 12, 0),
            title="Science fair",
        ),
        Event(
            id=3,
            date_from=datetime(2024, 3, 30, 8, 0),
            date_to=datetime(2024, 4, 2, 12, 0),
            title="Easter trip",
        ),
        MenuItem(id=1, name="Home", type="page_link", page_id=1, parent_id=None, lft=1),
        MenuItem(id=2, name="School", type="external_link", link="https://example.org", lft=2),
        MenuItem(id=3, name="About", type="page_link", page_id=1, parent_id=2, lft=3),
    ]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite database with the CMS tables and seed content."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(_seed_rows())
        await session.flush()
        await session.execute(
            insert(posts_pivot_labels_data),
            [
                {"posts_id": 1, "labels_id": 1},
                {"posts_id": 2, "labels_id": 1},
                {"posts_id": 2, "labels_id": 2},
                {"posts_id": 3, "labels_id": 2},
                {"posts_id": 4, "labels_id": 2},
            ],
        )
        await session.execute(
            insert(canteen_pivot_menus_data),
            [
                {"data_id": 1, "menu_id": 3},
                {"data_id": 1, "menu_id": 1},
                {"data_id": 2, "menu_id": 2},
                {"data_id": 3, "menu_id": 1},
            ],
        )
        await session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
def sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


# ============================================================================
# GraphQL Fixtures
# ============================================================================


@pytest.fixture
async def tx(sessionmaker):
    """Request transaction over the seeded database."""
    async with sessionmaker() as session, request_transaction(session) as transaction:
        yield transaction


@pytest.fixture
def graphql_context(tx) -> GraphQLContext:
    return GraphQLContext(transaction=tx)


@pytest.fixture
def execute(graphql_context):
    """Execute a document against the application schema.

    Example:
        result = await execute("{ posts { nodes { id } } }")
        assert result.errors is None
    """
    from school_api.features.graphql.schema import schema as default_schema

    async def _execute(query: str, variables: dict[str, Any] | None = None, *, schema=None):
        return await (schema or default_schema).execute(
            query,
            variable_values=variables,
            context_value=graphql_context,
        )

    return _execute


# ============================================================================
# Cache Fixtures
# ============================================================================


class FakeCache:
    """Dictionary-backed stand-in for RedisCache."""

    def __init__(self, *, fail: bool = False) -> None:
        self.data: dict[str, bytes] = {}
        self.fail = fail
        self.ttls: dict[str, int | None] = {}

    def _check(self) -> None:
        if self.fail:
            msg = "connection refused"
            raise RedisConnectionError(msg)

    async def get(self, key: str) -> bytes | None:
        self._check()
        return self.data.get(key)

    async def set(self, key: str, value: bytes | str, ttl: int | None = None) -> bool:
        self._check()
        self.data[key] = value if isinstance(value, bytes) else value.encode()
        self.ttls[key] = ttl
        return True

    async def delete(self, key: str) -> bool:
        self._check()
        return self.data.pop(key, None) is not None

    async def health_check(self) -> bool:
        return not self.fail


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(sessionmaker, fake_cache):
    """FastAPI application wired to the seeded database and the fake cache.

    The lifespan is not run: dependencies are overridden instead of
    connecting to PostgreSQL and Redis.
    """
    from school_api.app.main import create_app
    from school_api.features.graphql.persisted_queries import PersistedQueryStore
    from school_api.features.graphql.router import get_persisted_query_store, get_sessionmaker

    application = create_app()
    application.dependency_overrides[get_sessionmaker] = lambda: sessionmaker
    application.dependency_overrides[get_persisted_query_store] = lambda: PersistedQueryStore(
        fake_cache, key_prefix="test:apq:"
    )
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client calling the application in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
