"""Configuration settings management for the task lists backend.

This module provides centralized, hierarchical configuration management using
pydantic-settings with validation and multiple source support.

Features:
- Hierarchical BaseSettings classes with nested models
- Environment variable support with TASKLISTS_ prefix
- Field validation for log level and CORS origins
- Support for .env files and secrets directories
- Global settings caching
"""

import logging
import os
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration for the persistence gateway."""

    model_config = SettingsConfigDict(env_prefix="DATABASE_")

    url: str = Field("sqlite:///tasklists.db", description="Database connection URL")
    echo_sql: bool = Field(False, description="Enable SQL query logging for debugging")
    pool_timeout: int = Field(
        30, ge=1, le=300, description="Database connection timeout (seconds)"
    )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL points at SQLite."""
        return self.url.startswith("sqlite")


class ApiSettings(BaseSettings):
    """HTTP server configuration for the FastAPI surface."""

    model_config = SettingsConfigDict(env_prefix="API_")

    title: str = Field("Task Lists API", description="OpenAPI title")
    host: str = Field("127.0.0.1", description="Interface uvicorn binds to")
    port: int = Field(8000, ge=1, le=65535, description="Port uvicorn listens on")
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed by the CORS middleware",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: Any) -> Any:
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class TaskListsSettings(BaseSettings):
    """Root configuration aggregating all subsystem settings."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_file: str | None = Field(None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        env_prefix="TASKLISTS_",
        extra="ignore",
        validate_default=True,
        case_sensitive=False,
        secrets_dir=os.getenv("TASKLISTS_SECRETS_DIR"),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown levels."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug_mode else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> TaskListsSettings:
    """Get cached global settings instance.

    Returns:
        Global TaskListsSettings instance

    """
    return TaskListsSettings()


def get_database_url() -> str:
    """Get the database URL."""
    return get_settings().database.url


__all__ = [
    "ApiSettings",
    "DatabaseSettings",
    "TaskListsSettings",
    "get_database_url",
    "get_settings",
]
