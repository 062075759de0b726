"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: area_sessions.configs, area_sessions.application, area_sessions.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Header

from area_sessions.application.services import SessionStore
from area_sessions.boundary.blob import BlobStore


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._blob_store: BlobStore | None = None

    @property
    def blob_store(self) -> BlobStore:
        """Get cached blob store."""
        if self._blob_store is None:
            from area_sessions.boundary.blob.blob_store_factory import get_blob_store

            self._blob_store = get_blob_store()
        return self._blob_store

    def clear(self) -> None:
        """Drop cached instances."""
        self._blob_store = None


@lru_cache
def get_service_cache() -> ServiceCache:
    """Get the process-wide service cache."""
    return ServiceCache()


def get_blob_store() -> BlobStore:
    """Get the configured blob store."""
    return get_service_cache().blob_store


def get_user_id(x_user_id: str | None = Header(default=None)) -> str | None:
    """
    Signed-in user id from the X-User-Id header.

    Authentication happens upstream; an absent header means signed out.
    """
    if x_user_id is None:
        return None
    return x_user_id.strip() or None


def get_session_store(
    user_id: str | None = Depends(get_user_id),
    blob_store: BlobStore = Depends(get_blob_store),
) -> SessionStore:
    """Get a session store bound to the requesting user."""
    return SessionStore(blob_store=blob_store, identity=lambda: user_id)
