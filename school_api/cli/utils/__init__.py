"""CLI utilities for running async operations and formatting output."""

from school_api.cli.utils.async_runner import coro
from school_api.cli.utils.formatters import detail, error, header, info, success

__all__ = [
    "coro",
    "detail",
    "error",
    "header",
    "info",
    "success",
]
