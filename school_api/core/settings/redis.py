"""Redis settings for the persisted query cache."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_yaml_source


class RedisSettings(BaseSettings):
    """Redis connection settings.

    Environment variables use REDIS_ prefix, except the URL which is read
    from REDIS_URL. Leaving REDIS_URL unset disables persisted queries.
    """

    redis_url: str | None = Field(
        default=None,
        alias="REDIS_URL",
        description="Redis connection URL (redis://[username:password@]host:port/db).",
    )

    max_connections: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Maximum Redis connection pool size",
    )
    socket_timeout: float = Field(
        default=2.0,
        ge=0.1,
        le=30.0,
        description="Redis socket timeout in seconds (for operations)",
    )
    socket_connect_timeout: float = Field(
        default=2.0,
        ge=0.1,
        le=30.0,
        description="Redis socket connection timeout in seconds",
    )
    health_check_interval: int = Field(
        default=30,
        ge=0,
        description="Seconds between connection health checks (0 disables)",
    )

    key_prefix: str = Field(
        default="graphql:apq:",
        description="Key prefix for persisted query documents",
    )
    persisted_query_ttl: int | None = Field(
        default=None,
        ge=1,
        description="Expiry of persisted query documents in seconds (None keeps them forever)",
    )

    model_config = SettingsConfigDict(
        env_prefix="REDIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_yaml_source(settings_cls, "redis"),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @field_validator("persisted_query_ttl", mode="before")
    @classmethod
    def _normalize_ttl(cls, value: Any) -> Any:
        """Allow 'null', 'none' or '0' to disable expiry."""
        if isinstance(value, str) and value.strip().lower() in {"null", "none", "0"}:
            return None
        if value == 0:
            return None
        return value

    @property
    def is_configured(self) -> bool:
        return bool(self.redis_url)

    def connection_pool_kwargs(self) -> dict[str, Any]:
        """Return kwargs for redis.asyncio.ConnectionPool.from_url().

        Responses are left as bytes so that undecodable entries can be
        detected and evicted by the cache consumer.
        """
        kwargs: dict[str, Any] = {
            "max_connections": self.max_connections,
            "socket_timeout": self.socket_timeout,
            "socket_connect_timeout": self.socket_connect_timeout,
            "decode_responses": False,
        }
        if self.health_check_interval > 0:
            kwargs["health_check_interval"] = self.health_check_interval
        return kwargs
