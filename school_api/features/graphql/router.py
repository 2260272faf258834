"""GraphQL router for FastAPI integration.

Provides:
- POST {path}: executes an operation inside one request transaction,
  resolving automatic persisted queries first
- GET {path}: the GraphiQL IDE, unless disabled
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from graphql import FieldNode, GraphQLError, OperationDefinitionNode, parse

from school_api.core.database import TransactionBeginError, request_transaction
from school_api.core.exceptions import AppException
from school_api.core.settings import get_app_settings, get_graphql_settings, get_redis_settings
from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.errors import format_graphql_errors
from school_api.features.graphql.persisted_queries import PersistedQueryStore
from school_api.features.graphql.playground import register_playground_routes
from school_api.features.graphql.schema import schema
from school_api.features.graphql.schemas import GraphQLRequest
from school_api.infra.cache import get_cache
from school_api.infra.database import get_session_factory
from school_api.infra.logging import set_log_context

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
    from strawberry.types import ExecutionResult

logger = logging.getLogger(__name__)

INTROSPECTION_FIELDS = frozenset({"__schema", "__type", "__typename"})


def is_introspection_only(query: str, operation_name: str | None = None) -> bool:
    """Return True when the selected operation only reads schema metadata.

    Unparsable documents and operation names that select nothing return
    False, so the request runs inside a transaction and fails there as usual.
    """
    try:
        document = parse(query)
    except GraphQLError:
        return False

    operations = [
        definition
        for definition in document.definitions
        if isinstance(definition, OperationDefinitionNode)
    ]
    if operation_name is not None:
        operations = [
            op for op in operations if op.name is not None and op.name.value == operation_name
        ]
    if len(operations) != 1:
        return False

    selections = operations[0].selection_set.selections
    return bool(selections) and all(
        isinstance(selection, FieldNode) and selection.name.value in INTROSPECTION_FIELDS
        for selection in selections
    )


def get_persisted_query_store() -> PersistedQueryStore:
    """FastAPI dependency returning the persisted query store of the process."""
    settings = get_redis_settings()
    return PersistedQueryStore(
        get_cache(),
        key_prefix=settings.key_prefix,
        ttl=settings.persisted_query_ttl,
    )


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """FastAPI dependency returning the session factory of the process."""
    return get_session_factory()


def _error_response(
    message: str,
    code: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    error: dict[str, Any] = {"message": message}
    if code is not None:
        error["extensions"] = {"code": code}
    return JSONResponse({"data": None, "errors": [error]}, status_code=status_code)


def _result_response(result: ExecutionResult) -> JSONResponse:
    payload: dict[str, Any] = {"data": result.data}
    if result.errors:
        payload["errors"] = format_graphql_errors(
            result.errors, mask=get_graphql_settings().mask_errors
        )
    return JSONResponse(payload)


async def execute_graphql(
    request: Request,
    body: GraphQLRequest,
    store: Annotated[PersistedQueryStore, Depends(get_persisted_query_store)],
    sessionmaker: Annotated[Any, Depends(get_sessionmaker)],
) -> JSONResponse:
    """Execute one GraphQL operation.

    Every operation except schema introspection runs in its own transaction,
    committed after execution whatever the outcome of individual fields.
    """
    try:
        query = await store.resolve(body.query, body.extensions)
    except AppException as exc:
        logger.info("Persisted query rejected: %s", exc.detail, extra=exc.extra)
        return _error_response(exc.detail, exc.code)

    if not query:
        return _error_response(
            "No GraphQL query found in the request",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    if body.operation_name:
        set_log_context(operation_name=body.operation_name)

    context = GraphQLContext(request=request)

    if is_introspection_only(query, body.operation_name):
        result = await schema.execute(
            query,
            variable_values=body.variables,
            context_value=context,
            operation_name=body.operation_name,
        )
        return _result_response(result)

    async with sessionmaker() as session:
        try:
            async with request_transaction(session) as tx:
                context.transaction = tx
                result = await schema.execute(
                    query,
                    variable_values=body.variables,
                    context_value=context,
                    operation_name=body.operation_name,
                )
        except TransactionBeginError as exc:
            return _error_response(exc.detail, exc.code)

    return _result_response(result)


def create_graphql_router() -> APIRouter:
    """Create GraphQL router with settings-based configuration."""
    settings = get_graphql_settings()

    router = APIRouter(tags=["graphql"])
    router.add_api_route(
        settings.path,
        execute_graphql,
        methods=["POST"],
        response_model=None,
        summary="Execute a GraphQL operation",
    )

    if settings.playground_enabled:
        register_playground_routes(
            router,
            graphql_path=settings.path,
            title=get_app_settings().title,
        )

    return router


__all__ = [
    "create_graphql_router",
    "execute_graphql",
    "get_persisted_query_store",
    "get_sessionmaker",
    "is_introspection_only",
]
