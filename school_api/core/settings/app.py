"""Application settings for FastAPI configuration."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_yaml_source

Environment = Literal["development", "staging", "production", "test"]


class AppSettings(BaseSettings):
    """FastAPI application settings.

    Environment variables use APP_ prefix.
    Example: APP_DEBUG=true, APP_STORAGE_BASE_URL=https://cdn.example.org/storage
    """

    # Service identity
    service_name: str = Field(
        default="school-api",
        min_length=1,
        max_length=100,
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        description="Service name for logging/tracing (lowercase, hyphens allowed)",
    )
    title: str = Field(
        default="School Website GraphQL API",
        min_length=1,
        max_length=200,
        description="API title shown in the OpenAPI document",
    )
    version: str = Field(
        default="1.0.0",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9]+)?$",
        description="API version (semver format)",
    )
    environment: Environment = Field(
        default="development",
        description="Environment: development|staging|production|test",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    root_path: str = Field(
        default="",
        description="Root path for proxy/ingress (set when behind a reverse proxy)",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", min_length=1, description="Server bind host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # Public storage that serves uploaded images
    storage_base_url: str = Field(
        default="http://localhost/storage",
        min_length=1,
        description="Base URL prepended to stored image paths (no trailing slash)",
    )

    # CORS configuration
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Allowed CORS origins (JSON array). Empty allows every origin.",
    )
    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST"],
        description="Allowed HTTP methods",
    )
    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed headers",
    )
    cors_max_age: int = Field(
        default=3600,
        ge=0,
        le=86400,
        description="CORS preflight cache max-age in seconds",
    )

    gzip_minimum_size: int = Field(
        default=1000,
        ge=0,
        description="Responses smaller than this many bytes are not compressed",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_yaml_source(settings_cls, "app"),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @field_validator("storage_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_production_settings(self) -> AppSettings:
        """Validate settings for production environment."""
        if self.environment == "production" and self.debug:
            msg = "Debug mode cannot be enabled in production environment"
            raise ValueError(msg)
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def storage_url(self, folder: str, path: str) -> str:
        """Build the public URL of a stored file.

        Args:
            folder: Storage folder such as ``posts_images``.
            path: File path relative to the folder, as stored in the database.

        Returns:
            Absolute URL of the file.
        """
        return f"{self.storage_base_url}/{folder}/{path}"
