"""
Core session persistence logic.

Pure, I/O-free building blocks: schema migration, error classification
and the points fingerprint.
"""

from area_sessions.core.exceptions import (
    AreaSessionsException,
    StorageOperationError,
    ValidationError,
)
from area_sessions.core.points_hash import generate_points_hash
from area_sessions.core.session_migration import empty_index, migrate_index, migrate_session_data
from area_sessions.core.storage_errors import (
    is_object_not_found,
    map_storage_error,
    not_authenticated_error,
    session_not_found_error,
)

__all__ = [
    "AreaSessionsException",
    "StorageOperationError",
    "ValidationError",
    "empty_index",
    "generate_points_hash",
    "is_object_not_found",
    "map_storage_error",
    "migrate_index",
    "migrate_session_data",
    "not_authenticated_error",
    "session_not_found_error",
]
