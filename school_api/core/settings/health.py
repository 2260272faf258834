"""Health probe settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_yaml_source


class HealthSettings(BaseSettings):
    """Liveness and readiness probe configuration.

    Environment variables use HEALTH_ prefix.
    Example: HEALTH_MAX_THREADS=10000
    """

    max_threads: int = Field(
        default=10_000,
        ge=1,
        description="Liveness fails once the process reaches this many OS threads",
    )
    check_timeout: float = Field(
        default=2.0,
        ge=0.1,
        le=30.0,
        description="Timeout in seconds for each readiness dependency check",
    )
    check_redis: bool = Field(
        default=True,
        description="Include Redis in readiness when it is configured",
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
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
            create_yaml_source(settings_cls, "health"),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
