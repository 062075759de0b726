"""
Blob store configuration.

Selects the session blob backend and carries the S3 bucket and client
timeouts, or the root directory for the local development store.

Dependencies: pydantic_settings
System role: Session storage backend configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BlobStoreSettings(BaseSettings):
    """Settings for the session blob store."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BLOB_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    type: str = Field(
        default="local",
        description="Blob store type: 'local' for filesystem dev, 's3' for production",
    )
    bucket: str = Field(
        default="area-sessions-dev",
        description="S3 bucket holding per-user session documents",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for the S3 bucket",
    )
    local_root: str = Field(
        default=".area_sessions",
        description="Root directory for the local filesystem store",
    )

    # botocore client behaviour
    connect_timeout: float = Field(default=5.0, description="S3 connect timeout in seconds")
    read_timeout: float = Field(default=30.0, description="S3 read timeout in seconds")
    max_attempts: int = Field(default=3, description="Total S3 attempts per request")
