"""Pydantic schemas for the GraphQL HTTP transport."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphQLRequest(BaseModel):
    """Body of ``POST /graphql``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query: str | None = Field(default=None, description="GraphQL document")
    variables: dict[str, Any] | None = Field(default=None, description="Operation variables")
    operation_name: str | None = Field(
        default=None,
        alias="operationName",
        description="Operation to execute when the document defines several",
    )
    extensions: dict[str, Any] | None = Field(
        default=None,
        description="Protocol extensions, e.g. persistedQuery",
    )


class GraphQLResponse(BaseModel):
    """Body returned for every executed operation."""

    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None
