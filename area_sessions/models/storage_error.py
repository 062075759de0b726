"""
Storage error taxonomy.

Stable, UI-actionable classification of session storage failures.

Dependencies: pydantic
System role: Error contract between the session store and its callers
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class StorageErrorCode(str, Enum):
    """Fixed set of storage failure codes."""

    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    # Reserved: a missing index is treated as "no sessions yet"
    INDEX_NOT_FOUND = "INDEX_NOT_FOUND"
    # Reserved: a corrupted index falls back to an empty index
    INDEX_CORRUPTED = "INDEX_CORRUPTED"
    NETWORK_ERROR = "NETWORK_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    # Reserved
    INVALID_DATA = "INVALID_DATA"
    UNKNOWN = "UNKNOWN"


class StorageError(BaseModel):
    """Classified storage failure. `retry` hints whether retrying can help."""

    model_config = ConfigDict(frozen=True)

    code: StorageErrorCode
    message: str
    retry: bool
