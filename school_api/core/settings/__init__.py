"""Modular Pydantic Settings v2 configuration.

Settings are split by domain (app, db, redis, graphql, logging, health),
read from environment variables with a per-domain prefix, and optionally
from ``conf/<domain>.yaml`` files for local development.

Import settings via the cached loaders:
    from school_api.core.settings import get_app_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. YAML/conf.d files (optional, local/dev)
    3. Environment variables (production)
    4. .env file (development only)
    5. secrets_dir (Kubernetes/Docker secrets)
"""

from __future__ import annotations

from .app import AppSettings
from .database import DatabaseSettings
from .graphql import GraphQLSettings
from .health import HealthSettings
from .loader import (
    get_app_settings,
    get_db_settings,
    get_graphql_settings,
    get_health_settings,
    get_logging_settings,
    get_redis_settings,
)
from .logs import LoggingSettings
from .redis import RedisSettings

__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "GraphQLSettings",
    "HealthSettings",
    "LoggingSettings",
    "RedisSettings",
    "get_app_settings",
    "get_db_settings",
    "get_graphql_settings",
    "get_health_settings",
    "get_logging_settings",
    "get_redis_settings",
]
