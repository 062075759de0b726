"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from area_sessions.configs.base import BaseSettings
from area_sessions.configs.blob_store import BlobStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    blob_store: BlobStoreSettings = Field(default_factory=BlobStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from area_sessions.configs import get_settings
        settings = get_settings()
    """
    return Settings()
