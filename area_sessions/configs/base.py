"""
Base configuration settings.

Shared settings for the area session service: runtime environment, log
level and the address the API binds to. Specific config modules inherit
the env-file handling defined here.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class BaseSettings(PydanticBaseSettings):
    """Base configuration class for the area session service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment environment (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    api_host: str = Field(default="0.0.0.0", description="Address the session API binds to")
    api_port: int = Field(default=8000, description="Port the session API listens on")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
