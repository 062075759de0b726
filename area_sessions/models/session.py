"""
Session domain models.

Wire-compatible shapes of the two persisted documents (per-session blob and
per-user index) plus the client-side current-session tracker.
Persisted field names are camelCase; models accept either spelling.

Dependencies: pydantic
System role: Session persistence contracts
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Increment when TrackedPoint or SessionData structure changes
CURRENT_SCHEMA_VERSION = 1
INDEX_VERSION = 1

SESSION_NAME_MAX_LENGTH = 100
DEFAULT_SESSION_NAME = "Unnamed Session"
DEFAULT_META_NAME = "Unnamed"

PointType = Literal["manual", "auto"]


class DocumentModel(BaseModel):
    """Base for models persisted as JSON documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Render the camelCase JSON document, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LatLng(DocumentModel):
    """Geographic coordinate in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class TrackedPoint(DocumentModel):
    """A recorded point. Immutable once recorded."""

    model_config = ConfigDict(frozen=True)

    point: LatLng
    type: PointType = "manual"
    timestamp: int = Field(description="Epoch milliseconds when the point was recorded")


class SessionData(DocumentModel):
    """Full session blob stored at users/{uid}/sessions/{id}.json."""

    id: str
    name: str
    created_at: str
    updated_at: str
    schema_version: int = CURRENT_SCHEMA_VERSION
    points: list[TrackedPoint] = Field(default_factory=list)
    area: float = 0.0
    notes: str | None = None


class SessionMeta(DocumentModel):
    """Index entry projected from SessionData for listing."""

    id: str
    name: str
    created_at: str
    updated_at: str
    area: float = 0.0
    point_count: int = 0

    @classmethod
    def from_session(cls, session: SessionData) -> "SessionMeta":
        return cls(
            id=session.id,
            name=session.name,
            created_at=session.created_at,
            updated_at=session.updated_at,
            area=session.area,
            point_count=len(session.points),
        )


class UserSessionIndex(DocumentModel):
    """Per-user session index stored at users/{uid}/index.json."""

    version: int = INDEX_VERSION
    last_modified: str
    sessions: list[SessionMeta] = Field(default_factory=list)

    def find(self, session_id: str) -> SessionMeta | None:
        return next((s for s in self.sessions if s.id == session_id), None)


class CurrentSessionState(DocumentModel):
    """Client-side record of the session the live points were last saved to."""

    id: str
    name: str
    last_saved_at: str
    points_hash_at_save: str


def validate_session_name(name: str) -> str:
    """
    Trim and validate a user-supplied session name.

    Args:
        name: Raw name as typed by the user

    Returns:
        str: Trimmed name

    Raises:
        ValueError: If the trimmed name is empty or too long
    """
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValueError("Session name cannot be empty")
    if len(trimmed) > SESSION_NAME_MAX_LENGTH:
        raise ValueError(
            f"Session name exceeds maximum of {SESSION_NAME_MAX_LENGTH} characters"
        )
    return trimmed
