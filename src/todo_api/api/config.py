"""API configuration settings.

Provides settings for the API, the todo store, the database and logging.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from todo_api import __version__


class APISettings(BaseSettings):
    """General API settings."""

    title: str = Field(
        default="Todo API",
        description="API title",
    )
    description: str = Field(
        default="Minimal task management service",
        description="API description",
    )
    version: str = Field(
        default=__version__,
        description="API version",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        extra="ignore",
    )


class StoreSettings(BaseSettings):
    """Todo store selection."""

    backend: Literal["memory", "database"] = Field(
        default="memory",
        description="Where todos are kept: process memory or the SQL database",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORE_",
        env_file=".env",
        extra="ignore",
    )


class DatabaseSettings(BaseSettings):
    """SQL database settings, used when the store backend is 'database'."""

    url: str = Field(
        default="sqlite+aiosqlite:///./todos.db",
        description="Async SQLAlchemy connection URL",
    )
    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Connections allowed beyond pool_size")
    echo: bool = Field(default=False, description="Log emitted SQL")
    create_tables: bool = Field(
        default=True,
        description="Create missing tables on startup",
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """Logging settings."""

    level: str = Field(default="INFO", description="Minimum log level")
    json_format: bool = Field(default=False, description="Emit JSON log lines")

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_api_settings() -> APISettings:
    """Get cached API settings."""
    return APISettings()


@lru_cache
def get_store_settings() -> StoreSettings:
    """Get cached store settings."""
    return StoreSettings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()
