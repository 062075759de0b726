"""
Blob store protocol.

Minimal object-store surface consumed by the session store. Implementations
raise botocore errors on failure; a missing object is reported as a
ClientError with code "NoSuchKey" so callers classify both backends alike.

Dependencies: botocore
System role: Contract between the session store and object storage
"""

from typing import Protocol, runtime_checkable

from botocore.exceptions import ClientError

JSON_CONTENT_TYPE = "application/json"


@runtime_checkable
class BlobStore(Protocol):
    """Async object store keyed by slash-separated paths."""

    async def write(self, path: str, data: bytes, content_type: str = JSON_CONTENT_TYPE) -> None:
        """Create or overwrite the object at path."""
        ...

    async def read(self, path: str) -> bytes:
        """Return the object's bytes; raises NoSuchKey when absent."""
        ...

    async def delete(self, path: str) -> None:
        """Delete the object; raises NoSuchKey when absent."""
        ...

    async def list_all(self, prefix: str) -> list[str]:
        """Return every object path under prefix."""
        ...


def object_not_found(path: str, operation: str) -> ClientError:
    """Build the not-found error both backends raise for a missing object."""
    return ClientError(
        {
            "Error": {
                "Code": "NoSuchKey",
                "Message": "The specified key does not exist.",
                "Key": path,
            },
            "ResponseMetadata": {"HTTPStatusCode": 404},
        },
        operation,
    )
