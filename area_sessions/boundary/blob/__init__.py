"""
Blob storage boundary.

Exports: BlobStore, S3BlobStore, LocalBlobStore, get_blob_store
"""

from area_sessions.boundary.blob.blob_store import JSON_CONTENT_TYPE, BlobStore
from area_sessions.boundary.blob.blob_store_factory import get_blob_store
from area_sessions.boundary.blob.local_blob_store import LocalBlobStore
from area_sessions.boundary.blob.s3_blob_store import S3BlobStore

__all__ = [
    "JSON_CONTENT_TYPE",
    "BlobStore",
    "LocalBlobStore",
    "S3BlobStore",
    "get_blob_store",
]
