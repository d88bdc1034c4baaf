"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(
        default=None, description="Log file path (no file sink when empty)"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./data/books.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements to the log")
    timeout: int = Field(
        default=20, description="Seconds to wait on a locked SQLite database"
    )

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the URL points at SQLite."""
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def is_memory(self) -> bool:
        """Whether the URL points at an in-memory SQLite database."""
        if not self.is_sqlite:
            return False
        database = self.url.split("://", 1)[-1].lstrip("/")
        return database in ("", ":memory:")


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=3000, description="Application port")
    title: str = Field(default="Book Management API", description="OpenAPI title")
    version: str = Field(default="1.0.0", description="OpenAPI version")
    description: str = Field(
        default="Simple CRUD API for managing books",
        description="OpenAPI description",
    )
    docs_url: str = Field(default="/api-docs", description="Swagger UI path")

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
