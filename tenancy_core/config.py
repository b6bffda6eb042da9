"""
Unified configuration for dashboard-tenancy.

This module provides a single Settings class holding the index-pattern
naming convention, the running dashboard version and the search backend
connection. Values are read once at startup and never mutated afterwards.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for .env file loading (allows running from any CWD)
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Unified settings for dashboard-tenancy.

    Environment variables are loaded from .env file and can be overridden
    by actual environment variables.
    """

    # Service identification
    SERVICE_NAME: str = "dashboard-tenancy"

    # Index-pattern naming
    PROJECT_PREFIX: str = ""
    DASHBOARD_VERSION: str = "5.6.16"

    # Qdrant Configuration
    USE_QDRANT_CLOUD: bool = False
    QDRANT_DATABASE_HOST: str = "localhost"
    QDRANT_DATABASE_PORT: int = 6333
    QDRANT_CLOUD_URL: str = ""
    QDRANT_APIKEY: str | None = None
    QDRANT_SCROLL_LIMIT: int = 256

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        extra="ignore"
    )


# Global settings instance
settings = Settings()  # type: ignore
