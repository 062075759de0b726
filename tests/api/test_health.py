import pytest
from fastapi.testclient import TestClient

from area_sessions.api.deps import get_blob_store
from area_sessions.api.main import create_app
from area_sessions.boundary.blob import LocalBlobStore


@pytest.fixture
def client(tmp_path):
    app = create_app()
    app.dependency_overrides[get_blob_store] = lambda: LocalBlobStore(tmp_path)
    return TestClient(app)


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_blob_store(client):
    response = client.get("/health/blob-store")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Blob store ready (LocalBlobStore)"}


def test_app_registers_session_routes(client):
    paths = client.app.openapi()["paths"]
    assert "/sessions" in paths
    assert "/sessions/{session_id}" in paths
    assert "/sessions/{session_id}/index-entry" in paths
