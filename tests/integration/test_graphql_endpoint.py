"""Integration tests for the GraphQL HTTP endpoint."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from school_api.features.graphql.persisted_queries import query_hash

QUERY = "query Latest { posts(last: 1) { nodes { id title } } }"


def _persisted(sha: str) -> dict:
    return {"persistedQuery": {"version": 1, "sha256Hash": sha}}


@pytest.mark.integration
class TestGraphQLEndpoint:
    """Tests for POST /graphql."""

    async def test_query(self, client: AsyncClient):
        response = await client.post("/graphql", json={"query": QUERY})

        assert response.status_code == 200
        assert response.json() == {"data": {"posts": {"nodes": [{"id": 5, "title": "Open day"}]}}}

    async def test_variables_and_operation_name(self, client: AsyncClient):
        response = await client.post(
            "/graphql",
            json={
                "query": "query A { menu { name } } query B($id: Int!) { post(id: $id) { title } }",
                "operationName": "B",
                "variables": {"id": 2},
            },
        )

        assert response.json() == {"data": {"post": {"title": "Football cup"}}}

    async def test_resolver_error_in_body(self, client: AsyncClient):
        response = await client.post(
            "/graphql", json={"query": "{ events(year: 2024, month: 13) { id } }"}
        )

        body = response.json()
        assert response.status_code == 200
        assert body["data"] is None
        assert body["errors"][0]["message"] == "invalid date"
        assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
        assert body["errors"][0]["path"] == ["events"]

    async def test_validation_error(self, client: AsyncClient):
        response = await client.post("/graphql", json={"query": "{ nope }"})

        body = response.json()
        assert body["errors"][0]["extensions"]["code"] == "GRAPHQL_VALIDATION_FAILED"

    async def test_missing_query(self, client: AsyncClient):
        response = await client.post("/graphql", json={})

        assert response.status_code == 400
        assert response.json()["errors"][0]["message"] == "No GraphQL query found in the request"

    async def test_malformed_body(self, client: AsyncClient):
        response = await client.post("/graphql", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json()["errors"][0]["extensions"]["code"] == "BAD_REQUEST"

    async def test_introspection_operation(self, client: AsyncClient):
        response = await client.post(
            "/graphql",
            json={
                "query": "query IntrospectionQuery { __schema { queryType { name } } }",
                "operationName": "IntrospectionQuery",
            },
        )

        assert response.json() == {"data": {"__schema": {"queryType": {"name": "Query"}}}}

    async def test_data_query_named_like_introspection(self, client: AsyncClient):
        response = await client.post(
            "/graphql",
            json={
                "query": "query IntrospectionQuery { posts(last: 1) { nodes { id } } }",
                "operationName": "IntrospectionQuery",
            },
        )

        assert response.json() == {"data": {"posts": {"nodes": [{"id": 5}]}}}

    async def test_playground(self, client: AsyncClient):
        response = await client.get("/graphql")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<title>School Website GraphQL API</title>" in response.text


@pytest.mark.integration
class TestPersistedQueries:
    """Tests for the automatic persisted query flow over HTTP."""

    async def test_hash_only_miss(self, client: AsyncClient):
        response = await client.post("/graphql", json={"extensions": _persisted(query_hash(QUERY))})

        assert response.status_code == 200
        assert response.json() == {
            "data": None,
            "errors": [
                {
                    "message": "PersistedQueryNotFound",
                    "extensions": {"code": "PERSISTED_QUERY_NOT_FOUND"},
                }
            ],
        }

    async def test_register_then_hash_only(self, client: AsyncClient, fake_cache):
        sha = query_hash(QUERY)

        register = await client.post("/graphql", json={"query": QUERY, "extensions": _persisted(sha)})
        assert register.json()["data"]["posts"]["nodes"][0]["id"] == 5
        assert f"test:apq:{sha}" in fake_cache.data

        replay = await client.post("/graphql", json={"extensions": _persisted(sha)})
        assert replay.json() == register.json()

    async def test_hash_mismatch(self, client: AsyncClient):
        response = await client.post(
            "/graphql", json={"query": QUERY, "extensions": _persisted("0" * 64)}
        )

        error = response.json()["errors"][0]
        assert error["message"] == "provided sha does not match query"
        assert error["extensions"]["code"] == "BAD_USER_INPUT"


@pytest.mark.integration
class TestTransactionFailure:
    """Tests for a database that cannot start a transaction."""

    async def test_begin_failure(self, app, client: AsyncClient):
        from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

        from school_api.features.graphql.router import get_sessionmaker

        broken = create_async_engine("sqlite+aiosqlite:////nonexistent/dir/school.db")
        app.dependency_overrides[get_sessionmaker] = lambda: async_sessionmaker(broken)

        response = await client.post("/graphql", json={"query": "{ menu { name } }"})

        assert response.status_code == 200
        assert response.json()["errors"][0]["message"] == "Transaction begin failed"
        await broken.dispose()

    async def test_introspection_without_transaction(self, app, client: AsyncClient):
        from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

        from school_api.features.graphql.router import get_sessionmaker

        broken = create_async_engine("sqlite+aiosqlite:////nonexistent/dir/school.db")
        app.dependency_overrides[get_sessionmaker] = lambda: async_sessionmaker(broken)

        response = await client.post(
            "/graphql", json={"query": "{ __schema { queryType { name } } __typename }"}
        )

        assert response.json() == {
            "data": {"__schema": {"queryType": {"name": "Query"}}, "__typename": "Query"}
        }
        await broken.dispose()
