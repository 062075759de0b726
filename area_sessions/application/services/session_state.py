"""
Current-session tracking.

Remembers which stored session the live points belong to and the points
fingerprint at the last save, so callers can flag unsaved changes.

Dependencies: area_sessions.core.points_hash, area_sessions.models
System role: Unsaved-changes detection for session clients
"""

from collections.abc import Sequence

from area_sessions.core.points_hash import generate_points_hash
from area_sessions.models.session import (
    CurrentSessionState,
    SessionData,
    SessionMeta,
    TrackedPoint,
)


def track_saved_session(meta: SessionMeta, points: Sequence[TrackedPoint]) -> CurrentSessionState:
    """State after save_new_session/update_session returned `meta` for `points`."""
    return CurrentSessionState(
        id=meta.id,
        name=meta.name,
        last_saved_at=meta.updated_at,
        points_hash_at_save=generate_points_hash(points),
    )


def track_loaded_session(session: SessionData) -> CurrentSessionState:
    """State after load_session returned `session`."""
    return CurrentSessionState(
        id=session.id,
        name=session.name,
        last_saved_at=session.updated_at,
        points_hash_at_save=generate_points_hash(session.points),
    )


def has_unsaved_changes(
    state: CurrentSessionState | None,
    points: Sequence[TrackedPoint],
) -> bool:
    """
    Whether live points differ from the tracked session's last save.

    Untracked (never saved) points are not reported as unsaved changes.
    """
    if state is None:
        return False
    return generate_points_hash(points) != state.points_hash_at_save
