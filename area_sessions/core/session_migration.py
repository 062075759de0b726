"""
Schema migration for stored session documents.

Normalizes arbitrary decoded JSON (from any client version) into the current
SessionData / UserSessionIndex shapes. Every field is extracted defensively
with an explicit default, so any input produces a complete, current value.
Both entry points are pure and idempotent.

Dependencies: area_sessions.models
System role: Read-path normalization for the session store
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from area_sessions.core.clock import now_iso, now_ms
from area_sessions.models.session import (
    CURRENT_SCHEMA_VERSION,
    DEFAULT_META_NAME,
    DEFAULT_SESSION_NAME,
    INDEX_VERSION,
    LatLng,
    SessionData,
    SessionMeta,
    TrackedPoint,
    UserSessionIndex,
)

logger = logging.getLogger(__name__)

_POINT_TYPES = ("manual", "auto")


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------

def _as_document(value: Any) -> Any:
    """Already-parsed models are read back through their JSON document."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def _as_mapping(value: Any) -> Mapping[str, Any]:
    value = _as_document(value)
    return value if isinstance(value, Mapping) else {}


def _as_text(value: Any, default: str) -> str:
    """Non-empty string or the default."""
    if isinstance(value, str) and value:
        return value
    return default


def _as_float(value: Any, default: float = 0.0) -> float:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float, str)):
        try:
            number = float(value)
        except (ValueError, OverflowError):
            return default
        return number if math.isfinite(number) else default
    return default


def _as_int(value: Any, default: int) -> int:
    number = _as_float(value, float("nan"))
    if math.isnan(number):
        return default
    return int(number)


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

def _migrate_point(raw: Any, timestamp_default: int) -> TrackedPoint:
    """
    Normalize one stored point.

    Current shape nests coordinates under "point"; legacy points carry
    lat/lng at the top level. Null entries become a manual point at 0,0.
    """
    raw = _as_document(raw)
    if not isinstance(raw, Mapping):
        return TrackedPoint(
            point=LatLng(lat=0.0, lng=0.0),
            type="manual",
            timestamp=timestamp_default,
        )

    nested = raw.get("point")
    coords = nested if isinstance(nested, Mapping) else raw

    point_type = raw.get("type")
    if point_type not in _POINT_TYPES:
        point_type = "manual"

    return TrackedPoint(
        point=LatLng(lat=_as_float(coords.get("lat")), lng=_as_float(coords.get("lng"))),
        type=point_type,
        timestamp=_as_int(raw.get("timestamp"), timestamp_default),
    )


def migrate_session_data(data: Any) -> SessionData:
    """
    Migrate a decoded session blob to the current schema.

    Missing or zero schemaVersion marks a legacy (v0) document. Current
    documents pass through the same defensive normalization, so the result
    is always complete and migrating twice equals migrating once.

    Args:
        data: Decoded JSON of any shape (None and non-objects allowed)

    Returns:
        SessionData: New, fully populated value at CURRENT_SCHEMA_VERSION
    """
    raw = _as_mapping(data)
    version = _as_int(raw.get("schemaVersion"), 0)

    if version < CURRENT_SCHEMA_VERSION:
        logger.debug(
            f"{__name__}:migrate_session_data - Migrating session "
            f"from v{version} to v{CURRENT_SCHEMA_VERSION}"
        )
    elif version > CURRENT_SCHEMA_VERSION:
        logger.warning(
            f"{__name__}:migrate_session_data - Session written by newer schema "
            f"v{version}, normalizing to v{CURRENT_SCHEMA_VERSION}"
        )

    timestamp = now_iso()
    point_timestamp = now_ms()

    points = raw.get("points")
    if not isinstance(points, list):
        points = []

    notes = raw.get("notes")

    return SessionData(
        id=_as_text(raw.get("id"), ""),
        name=_as_text(raw.get("name"), DEFAULT_SESSION_NAME),
        created_at=_as_text(raw.get("createdAt"), timestamp),
        updated_at=_as_text(raw.get("updatedAt"), timestamp),
        schema_version=CURRENT_SCHEMA_VERSION,
        points=[_migrate_point(p, point_timestamp) for p in points],
        area=_as_float(raw.get("area")),
        notes=notes if isinstance(notes, str) else None,
    )


# ---------------------------------------------------------------------------
# Index
# ---------------------------------------------------------------------------

def _migrate_session_meta(raw: Any, timestamp: str) -> SessionMeta:
    meta = _as_mapping(raw)
    created_at = _as_text(meta.get("createdAt"), timestamp)
    return SessionMeta(
        id=_as_text(meta.get("id"), ""),
        name=_as_text(meta.get("name"), DEFAULT_META_NAME),
        created_at=created_at,
        updated_at=_as_text(meta.get("updatedAt"), created_at),
        area=_as_float(meta.get("area")),
        point_count=max(_as_int(meta.get("pointCount"), 0), 0),
    )


def migrate_index(data: Any) -> UserSessionIndex:
    """
    Migrate a decoded index document to the current version.

    v0 indexes were a bare list of session metadata; current indexes wrap
    the list with version and lastModified. Null entries are replaced by a
    defaulted meta rather than dropped.

    Args:
        data: Decoded JSON of any shape

    Returns:
        UserSessionIndex: New index at INDEX_VERSION
    """
    timestamp = now_iso()
    data = _as_document(data)

    if isinstance(data, list):
        entries: list[Any] = data
        last_modified = timestamp
        logger.debug(f"{__name__}:migrate_index - Wrapping legacy list index")
    elif isinstance(data, Mapping):
        sessions = data.get("sessions")
        entries = sessions if isinstance(sessions, list) else []
        last_modified = _as_text(data.get("lastModified"), timestamp)
    else:
        entries = []
        last_modified = timestamp

    return UserSessionIndex(
        version=INDEX_VERSION,
        last_modified=last_modified,
        sessions=[_migrate_session_meta(entry, timestamp) for entry in entries],
    )


def empty_index() -> UserSessionIndex:
    """Fresh current-version index with no sessions."""
    return UserSessionIndex(version=INDEX_VERSION, last_modified=now_iso(), sessions=[])
