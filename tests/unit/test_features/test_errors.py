"""Unit tests for GraphQL error formatting."""

from __future__ import annotations

import logging

import pytest
from graphql import GraphQLError

from school_api.core.exceptions import InvalidArgumentError, InvalidStoredDataError
from school_api.features.graphql.errors import (
    MASKED_MESSAGE,
    error_code,
    format_graphql_error,
    format_graphql_errors,
    log_graphql_errors,
)


def _error(original: Exception | None, message: str = "failed") -> GraphQLError:
    return GraphQLError(message, path=["posts"], original_error=original)


@pytest.mark.unit
class TestFormatGraphQLError:
    """Tests for error classification and masking."""

    def test_user_input_error(self):
        error = _error(InvalidArgumentError("invalid date"), "invalid date")

        formatted = format_graphql_error(error)

        assert formatted["message"] == "invalid date"
        assert formatted["extensions"] == {"code": "BAD_USER_INPUT"}
        assert formatted["path"] == ["posts"]

    def test_app_exception_not_masked(self):
        error = _error(InvalidStoredDataError("No index image found"), "No index image found")

        formatted = format_graphql_error(error)

        assert formatted["message"] == "No index image found"
        assert formatted["extensions"]["code"] == "INTERNAL_SERVER_ERROR"

    def test_unexpected_exception_masked(self):
        error = _error(KeyError("secret column"), "'secret column'")

        formatted = format_graphql_error(error)

        assert formatted["message"] == MASKED_MESSAGE
        assert formatted["extensions"]["code"] == "INTERNAL_SERVER_ERROR"

    def test_masking_disabled(self):
        error = _error(KeyError("secret column"), "'secret column'")

        assert format_graphql_error(error, mask=False)["message"] == "'secret column'"

    def test_validation_error(self):
        error = GraphQLError("Cannot query field 'nope' on type 'Query'.")

        assert error_code(error) == "GRAPHQL_VALIDATION_FAILED"

    def test_existing_code_kept(self):
        error = GraphQLError("depth", extensions={"code": "DEPTH_LIMIT"})

        assert format_graphql_errors([error])[0]["extensions"]["code"] == "DEPTH_LIMIT"


@pytest.mark.unit
class TestLogGraphQLErrors:
    """Tests for server-side error logging."""

    def test_client_error_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="school_api.features.graphql.errors"):
            log_graphql_errors([_error(InvalidArgumentError("invalid date"))])

        assert [record.levelno for record in caplog.records] == [logging.INFO]

    def test_server_error_logged_with_traceback(self, caplog):
        with caplog.at_level(logging.INFO, logger="school_api.features.graphql.errors"):
            log_graphql_errors([_error(RuntimeError("boom"))])

        (record,) = caplog.records
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None
        assert record.error_code == "INTERNAL_SERVER_ERROR"
