"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        LABDOCS_DB_HOST: Database host (default: localhost)
        LABDOCS_DB_PORT: Database port (default: 5432)
        LABDOCS_DB_DATABASE: Database name (default: labdocs)
        LABDOCS_DB_USERNAME: Database user (default: labdocs)
        LABDOCS_DB_PASSWORD: Database password (required in production)
        LABDOCS_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        LABDOCS_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        LABDOCS_DB_POOL_ENABLED: Enable connection pooling (default: true)
        LABDOCS_DB_STATEMENT_TIMEOUT_MS: Per-statement deadline (default: 30000)
        LABDOCS_DB_CONNECT_TIMEOUT_SECONDS: Connection deadline (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="LABDOCS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="labdocs", description="Database name")
    username: str = Field(default="labdocs", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    pool_enabled: bool = Field(
        default=True,
        description="Enable connection pooling",
    )
    statement_timeout_ms: int = Field(
        default=30000,
        description="PostgreSQL statement_timeout applied to pooled connections",
        ge=0,
    )
    connect_timeout_seconds: int = Field(
        default=10,
        description="Timeout for establishing a new connection",
        ge=1,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"

    @property
    def connection_options(self) -> str:
        """libpq ``options`` string applied to every pooled connection."""
        return f"-c statement_timeout={self.statement_timeout_ms}"


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="LABDOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Lab Docs API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://localhost:5174",
        ],
        description="Origins allowed by the CORS middleware",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return (value or "INFO").upper()

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()
