"""
Blob store factory for selecting between local filesystem (dev) and S3 (prod).

Depends on BLOB_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: area_sessions.boundary.blob, area_sessions.configs
System role: Blob store instantiation and selection
"""

import logging

from area_sessions.boundary.blob.blob_store import BlobStore
from area_sessions.boundary.blob.local_blob_store import LocalBlobStore
from area_sessions.boundary.blob.s3_blob_store import S3BlobStore
from area_sessions.configs import get_settings

logger = logging.getLogger(__name__)


def get_blob_store() -> BlobStore:
    """
    Factory function to get blob store based on environment configuration.

    Returns:
        LocalBlobStore or S3BlobStore: Configured blob store instance

    Raises:
        ValueError: If BLOB_STORE_TYPE is invalid
    """
    settings = get_settings().blob_store
    store_type = settings.type.lower()

    if store_type == "local":
        logger.info(f"{__name__}:get_blob_store - Creating local blob store (dev mode)")
        return LocalBlobStore(root=settings.local_root)

    elif store_type == "s3":
        logger.info(f"{__name__}:get_blob_store - Creating S3 blob store (production mode)")
        return S3BlobStore(
            bucket=settings.bucket,
            region=settings.region,
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            max_attempts=settings.max_attempts,
        )

    else:
        raise ValueError(
            f"Invalid BLOB_STORE_TYPE: {store_type}. "
            f"Must be 'local' (dev) or 's3' (production)."
        )
