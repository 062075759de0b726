"""
Session API endpoints.

Routes:
- GET /sessions - Fetch the session index (204 when none saved yet)
- POST /sessions - Save points as a new session
- DELETE /sessions - Delete every session and the index
- GET /sessions/{id} - Load a full session
- PUT /sessions/{id} - Replace a session's points and area
- PATCH /sessions/{id} - Rename a session
- DELETE /sessions/{id} - Delete a session
- DELETE /sessions/{id}/index-entry - Drop a dangling index entry

Identity is taken from the X-User-Id header.

Dependencies: area_sessions.application.services, area_sessions.models
System role: Session persistence HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from area_sessions.api.deps.dependencies import get_session_store
from area_sessions.application.services import SessionStore
from area_sessions.models.api import (
    RenameSessionRequest,
    SaveSessionRequest,
    UpdateSessionRequest,
)
from area_sessions.models.session import SessionData, SessionMeta, UserSessionIndex

from .session_error_handling import handle_session_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=UserSessionIndex)
@handle_session_errors
async def fetch_index(
    store: SessionStore = Depends(get_session_store),
):
    """
    Fetch the caller's session index.

    Returns:
        UserSessionIndex, or 204 when the user has no index yet
    """
    index = await store.fetch_index()
    if index is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return index


@router.post("", response_model=SessionMeta, status_code=status.HTTP_201_CREATED)
@handle_session_errors
async def save_new_session(
    request: SaveSessionRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionMeta:
    """
    Save points as a new session.

    Raises:
        HTTPException(400): No points or invalid name
        HTTPException(401): Missing identity
    """
    meta = await store.save_new_session(request.name, request.points, request.area)
    logger.info(
        "Session created",
        extra={"session_id": meta.id, "point_count": meta.point_count}
    )
    return meta


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
@handle_session_errors
async def delete_all_sessions(
    store: SessionStore = Depends(get_session_store),
) -> Response:
    """Delete every session of the caller and the index."""
    await store.delete_all_sessions()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{session_id}",
    response_model=SessionData,
    response_model_exclude_none=True,
)
@handle_session_errors
async def load_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionData:
    """
    Load a full session.

    Raises:
        HTTPException(404): Session blob missing; the client may call
        DELETE /sessions/{id}/index-entry to repair the index
    """
    return await store.load_session(session_id)


@router.put("/{session_id}", response_model=SessionMeta)
@handle_session_errors
async def update_session(
    session_id: str,
    request: UpdateSessionRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionMeta:
    """Replace a session's points and area."""
    return await store.update_session(session_id, request.points, request.area)


@router.patch("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_session_errors
async def rename_session(
    session_id: str,
    request: RenameSessionRequest,
    store: SessionStore = Depends(get_session_store),
) -> Response:
    """Rename a session."""
    await store.rename_session(session_id, request.name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_session_errors
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> Response:
    """Delete a session and its index entry."""
    await store.delete_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{session_id}/index-entry", status_code=status.HTTP_204_NO_CONTENT)
@handle_session_errors
async def remove_from_index(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> Response:
    """Remove a dangling index entry without touching any blob."""
    await store.remove_from_index(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
