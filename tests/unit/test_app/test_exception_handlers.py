"""Unit tests for the HTTP exception handlers."""

from __future__ import annotations

import json

import pytest
from starlette.requests import Request

from school_api.app.exception_handlers import app_exception_handler, unhandled_exception_handler
from school_api.core.exceptions import AppException, InvalidArgumentError


def _request() -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": "/health",
            "query_string": b"",
            "headers": [],
            "state": {"request_id": "req-1"},
        }
    )


@pytest.mark.unit
class TestAppExceptionHandler:
    """Tests for the AppException to HTTP status mapping."""

    async def test_user_input_is_bad_request(self):
        response = await app_exception_handler(_request(), InvalidArgumentError("invalid date"))

        assert response.status_code == 400
        assert json.loads(response.body) == {
            "errors": [{"message": "invalid date", "extensions": {"code": "BAD_USER_INPUT"}}],
            "request_id": "req-1",
        }

    async def test_server_error(self):
        response = await app_exception_handler(_request(), AppException("boom"))

        assert response.status_code == 500
        assert json.loads(response.body)["errors"][0]["extensions"]["code"] == "INTERNAL_SERVER_ERROR"

    async def test_unhandled_exception_is_masked(self):
        response = await unhandled_exception_handler(_request(), RuntimeError("secret detail"))

        assert response.status_code == 500
        assert json.loads(response.body)["errors"][0]["message"] == "Internal server error"
