"""
Test suite for current-session tracking helpers.

System role: Verification of unsaved-changes detection
"""

from area_sessions.application.services import (
    has_unsaved_changes,
    track_loaded_session,
    track_saved_session,
)
from area_sessions.core.points_hash import generate_points_hash
from area_sessions.models import SessionData, SessionMeta


def _meta(points) -> SessionMeta:
    return SessionMeta(
        id="s1",
        name="Area 1",
        created_at="2024-01-31T10:00:00.000Z",
        updated_at="2024-01-31T11:00:00.000Z",
        area=10.0,
        point_count=len(points),
    )


class TestTrackSession:
    """Building CurrentSessionState after save and load."""

    def test_track_saved_session(self, sample_points) -> None:
        state = track_saved_session(_meta(sample_points), sample_points)

        assert state.id == "s1"
        assert state.name == "Area 1"
        assert state.last_saved_at == "2024-01-31T11:00:00.000Z"
        assert state.points_hash_at_save == generate_points_hash(sample_points)

    def test_track_loaded_session(self, sample_points) -> None:
        session = SessionData(
            id="s1",
            name="Area 1",
            created_at="2024-01-31T10:00:00.000Z",
            updated_at="2024-01-31T11:00:00.000Z",
            points=sample_points,
        )

        state = track_loaded_session(session)

        assert state == track_saved_session(_meta(sample_points), sample_points)


class TestHasUnsavedChanges:
    """Comparing live points to the tracked fingerprint."""

    def test_untracked_points_are_not_unsaved(self, sample_points) -> None:
        assert has_unsaved_changes(None, sample_points) is False

    def test_unchanged_points(self, sample_points) -> None:
        state = track_saved_session(_meta(sample_points), sample_points)

        assert has_unsaved_changes(state, list(sample_points)) is False

    def test_added_point_is_unsaved(self, sample_points, point_factory) -> None:
        state = track_saved_session(_meta(sample_points), sample_points)

        assert has_unsaved_changes(state, [*sample_points, point_factory(33.0, 35.0)]) is True

    def test_moved_point_is_unsaved(self, sample_points, point_factory) -> None:
        state = track_saved_session(_meta(sample_points), sample_points)
        moved = [point_factory(32.0001, 34.0), *sample_points[1:]]

        assert has_unsaved_changes(state, moved) is True

    def test_cleared_points_are_unsaved(self, sample_points) -> None:
        state = track_saved_session(_meta(sample_points), sample_points)

        assert has_unsaved_changes(state, []) is True
