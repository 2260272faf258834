"""GraphQL server configuration settings.

Controls the GraphQL endpoint, IDE, query limits and connection page sizes.
Environment variables use GRAPHQL_ prefix.
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_yaml_source


class GraphQLSettings(BaseSettings):
    """GraphQL server configuration.

    Environment variables use GRAPHQL_ prefix.
    Example: GRAPHQL_PATH=/graphql, GRAPHQL_DEFAULT_PAGE_SIZE=20
    """

    path: str = Field(
        default="/graphql",
        min_length=1,
        max_length=255,
        pattern=r"^/.*$",
        description="GraphQL endpoint path",
    )

    disable_playground: bool = Field(
        default=False,
        description="Disable the GraphiQL IDE served on GET requests",
    )

    # Query limits
    max_query_depth: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Maximum query nesting depth",
    )

    # Pagination defaults
    default_page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Page size applied when neither first nor last is given",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Largest accepted value for first/last",
    )

    introspection_enabled: bool = Field(
        default=True,
        description="Enable GraphQL schema introspection",
    )
    mask_errors: bool = Field(
        default=True,
        description="Replace unexpected exception messages with a generic error",
    )

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_",
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
            create_yaml_source(settings_cls, "graphql"),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @model_validator(mode="after")
    def validate_page_sizes(self) -> GraphQLSettings:
        """Validate that the default page size fits under the maximum."""
        if self.default_page_size > self.max_page_size:
            msg = "default_page_size cannot exceed max_page_size"
            raise ValueError(msg)
        return self

    @property
    def playground_enabled(self) -> bool:
        return not self.disable_playground
