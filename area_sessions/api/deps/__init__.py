"""API dependencies."""

from area_sessions.api.deps.dependencies import (
    ServiceCache,
    get_blob_store,
    get_service_cache,
    get_session_store,
    get_user_id,
)

__all__ = [
    "ServiceCache",
    "get_blob_store",
    "get_service_cache",
    "get_session_store",
    "get_user_id",
]
