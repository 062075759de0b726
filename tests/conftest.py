"""
Shared test fixtures and configuration for entire test suite.

Provides: point factories, local blob store rooted in tmp_path, session stores
Dependencies: pytest, area_sessions
System role: Test infrastructure and fixture management
"""

import pytest

from area_sessions.application.services import SessionStore
from area_sessions.boundary.blob import LocalBlobStore
from area_sessions.models import LatLng, TrackedPoint


def make_point(
    lat: float = 32.0,
    lng: float = 34.0,
    point_type: str = "manual",
    timestamp: int = 1706698800000,
) -> TrackedPoint:
    """Build a TrackedPoint with sensible defaults."""
    return TrackedPoint(point=LatLng(lat=lat, lng=lng), type=point_type, timestamp=timestamp)


@pytest.fixture
def user_id() -> str:
    """Signed-in test user id."""
    return "user-123"


@pytest.fixture
def sample_points() -> list[TrackedPoint]:
    """Three distinct points forming a small triangle."""
    return [
        make_point(32.0, 34.0, "manual", 1706698800000),
        make_point(32.001, 34.0, "auto", 1706698801000),
        make_point(32.001, 34.001, "manual", 1706698802000),
    ]


@pytest.fixture
def blob_store(tmp_path) -> LocalBlobStore:
    """
    Local blob store rooted in a per-test temp directory.

    Returns:
        LocalBlobStore: Empty store
    """
    return LocalBlobStore(tmp_path / "blobs")


@pytest.fixture
def session_store(blob_store: LocalBlobStore, user_id: str) -> SessionStore:
    """Session store for a signed-in user over the local blob store."""
    return SessionStore(blob_store=blob_store, identity=lambda: user_id)


@pytest.fixture
def signed_out_store(blob_store: LocalBlobStore) -> SessionStore:
    """Session store with no signed-in identity."""
    return SessionStore(blob_store=blob_store, identity=lambda: None)


@pytest.fixture
def point_factory():
    """Factory fixture exposing make_point to tests."""
    return make_point
