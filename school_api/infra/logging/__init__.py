"""Structured logging: dictConfig setup, JSONL formatter and context injection."""

from __future__ import annotations

from .config import configure_logging, setup_logging, shutdown
from .context import ContextInjectingFilter, clear_log_context, get_log_context, set_log_context
from .formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
