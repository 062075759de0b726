"""
Health check API endpoints.

Routes: GET /health, GET /health/blob-store

Dependencies: area_sessions.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from area_sessions.api.deps.dependencies import get_blob_store
from area_sessions.boundary.blob import BlobStore


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/blob-store", response_model=HealthResponse)
async def health_check_blob_store(
    blob_store: BlobStore = Depends(get_blob_store),
) -> HealthResponse:
    """Report which session blob backend is configured."""
    return HealthResponse(
        status="healthy",
        message=f"Blob store ready ({type(blob_store).__name__})",
    )
