"""
Application services.

Exports: SessionStore and current-session tracking helpers
"""

from area_sessions.application.services.session_state import (
    has_unsaved_changes,
    track_loaded_session,
    track_saved_session,
)
from area_sessions.application.services.session_store import IdentityProvider, SessionStore

__all__ = [
    "IdentityProvider",
    "SessionStore",
    "has_unsaved_changes",
    "track_loaded_session",
    "track_saved_session",
]
