"""
Session API request schemas.

Responses reuse the persisted models (SessionMeta, SessionData,
UserSessionIndex) so HTTP clients see the stored camelCase documents.

Dependencies: pydantic
System role: Session HTTP API contracts
"""

from pydantic import BaseModel, Field

from area_sessions.models.session import TrackedPoint


class SaveSessionRequest(BaseModel):
    """Request schema for saving points as a new session."""

    name: str = Field(description="Session name, trimmed server-side")
    points: list[TrackedPoint] = Field(description="Recorded points in path order")
    area: float = Field(default=0.0, ge=0, description="Area in square meters")


class UpdateSessionRequest(BaseModel):
    """Request schema for replacing a session's points."""

    points: list[TrackedPoint] = Field(description="Recorded points in path order")
    area: float = Field(default=0.0, ge=0, description="Area in square meters")


class RenameSessionRequest(BaseModel):
    """Request schema for renaming a session."""

    name: str = Field(description="New session name")
