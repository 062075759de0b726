"""
Domain models.

Exports session documents, current-session state and the storage error value.
"""

from area_sessions.models.session import (
    CURRENT_SCHEMA_VERSION,
    INDEX_VERSION,
    SESSION_NAME_MAX_LENGTH,
    CurrentSessionState,
    LatLng,
    SessionData,
    SessionMeta,
    TrackedPoint,
    UserSessionIndex,
    validate_session_name,
)
from area_sessions.models.storage_error import StorageError, StorageErrorCode

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "INDEX_VERSION",
    "SESSION_NAME_MAX_LENGTH",
    "CurrentSessionState",
    "LatLng",
    "SessionData",
    "SessionMeta",
    "StorageError",
    "StorageErrorCode",
    "TrackedPoint",
    "UserSessionIndex",
    "validate_session_name",
]
