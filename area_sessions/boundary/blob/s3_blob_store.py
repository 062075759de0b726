"""
S3 blob store for session documents.

Production backend. boto3 is synchronous, so each call runs on a worker
thread via asyncio.to_thread; the event loop never blocks on S3.

Dependencies: boto3, botocore
System role: Remote object storage for per-user session documents
"""

import asyncio
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from area_sessions.boundary.blob.blob_store import JSON_CONTENT_TYPE, object_not_found

logger = logging.getLogger(__name__)

_MISSING_CODES = ("404", "NoSuchKey", "NotFound")


class S3BlobStore:
    """Blob store backed by a single S3 bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-2",
        s3_client: Any = None,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialize S3 blob store.

        Args:
            bucket: S3 bucket name for session documents
            region: AWS region for S3 bucket
            s3_client: Pre-built boto3 S3 client (tests, shared sessions)
            connect_timeout: Connect timeout in seconds
            read_timeout: Read timeout in seconds
            max_attempts: Total attempts including retries

        Raises:
            ValueError: If bucket is empty
        """
        if not bucket:
            raise ValueError("bucket is required")

        self._bucket = bucket
        self._region = region
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=region,
            config=Config(
                connect_timeout=connect_timeout,
                read_timeout=read_timeout,
                retries={"max_attempts": max_attempts, "mode": "standard"},
            ),
        )

        logger.debug(f"{__name__}:__init__ - S3BlobStore initialized bucket={bucket}")

    @property
    def bucket(self) -> str:
        return self._bucket

    async def write(self, path: str, data: bytes, content_type: str = JSON_CONTENT_TYPE) -> None:
        """
        Upload an object, replacing any existing one.

        Args:
            path: S3 object key
            data: Object body
            content_type: MIME type stored with the object

        Raises:
            ClientError: If the upload fails
        """
        await asyncio.to_thread(
            self._s3_client.put_object,
            Bucket=self._bucket,
            Key=path,
            Body=data,
            ContentType=content_type,
        )
        logger.debug(f"{__name__}:write - Uploaded key={path}, size={len(data)} bytes")

    def _get_bytes(self, path: str) -> bytes:
        try:
            response = self._s3_client.get_object(Bucket=self._bucket, Key=path)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                raise object_not_found(path, "GetObject") from e
            raise
        return response["Body"].read()

    async def read(self, path: str) -> bytes:
        """
        Download an object.

        Args:
            path: S3 object key

        Returns:
            bytes: Object body

        Raises:
            ClientError: NoSuchKey when the object does not exist, or any S3 failure
        """
        return await asyncio.to_thread(self._get_bytes, path)

    def _delete_existing(self, path: str) -> None:
        # S3 deletes are idempotent; probe first so a missing object is reported
        try:
            self._s3_client.head_object(Bucket=self._bucket, Key=path)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                raise object_not_found(path, "DeleteObject") from e
            raise
        self._s3_client.delete_object(Bucket=self._bucket, Key=path)

    async def delete(self, path: str) -> None:
        """
        Delete an object.

        Args:
            path: S3 object key

        Raises:
            ClientError: NoSuchKey when the object does not exist, or any S3 failure
        """
        await asyncio.to_thread(self._delete_existing, path)
        logger.debug(f"{__name__}:delete - Deleted key={path}")

    def _list_keys(self, prefix: str) -> list[str]:
        paginator = self._s3_client.get_paginator("list_objects_v2")
        keys: list[str] = []
        for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
            keys.extend(obj["Key"] for obj in page.get("Contents", []))
        return keys

    async def list_all(self, prefix: str) -> list[str]:
        """
        List every object key under a prefix.

        Args:
            prefix: Key prefix, e.g. "users/{uid}/sessions/"

        Returns:
            list[str]: Matching keys
        """
        return await asyncio.to_thread(self._list_keys, prefix)
