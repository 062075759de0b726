"""
Test suite for session document models and the exception hierarchy.

System role: Verification of persisted document shapes
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from area_sessions.core.exceptions import (
    AreaSessionsException,
    StorageOperationError,
    ValidationError,
)
from area_sessions.core.storage_errors import session_not_found_error
from area_sessions.models import (
    SESSION_NAME_MAX_LENGTH,
    LatLng,
    SessionData,
    SessionMeta,
    TrackedPoint,
    UserSessionIndex,
    validate_session_name,
)


@pytest.fixture
def session(sample_points) -> SessionData:
    return SessionData(
        id="s1",
        name="Area 1",
        created_at="2024-01-31T10:00:00.000Z",
        updated_at="2024-01-31T11:00:00.000Z",
        points=sample_points,
        area=150.5,
    )


class TestDocuments:
    """camelCase JSON documents."""

    def test_session_document_uses_camel_case(self, session: SessionData) -> None:
        document = session.to_document()

        assert set(document) == {
            "id", "name", "createdAt", "updatedAt", "schemaVersion", "points", "area",
        }
        assert document["schemaVersion"] == 1

    def test_notes_included_when_set(self, session: SessionData) -> None:
        document = session.model_copy(update={"notes": "edge of field"}).to_document()

        assert document["notes"] == "edge of field"

    def test_models_accept_either_spelling(self) -> None:
        by_alias = SessionMeta.model_validate(
            {"id": "s1", "name": "A", "createdAt": "t", "updatedAt": "t", "pointCount": 2}
        )
        by_name = SessionMeta(id="s1", name="A", created_at="t", updated_at="t", point_count=2)

        assert by_alias == by_name

    def test_meta_from_session(self, session: SessionData) -> None:
        meta = SessionMeta.from_session(session)

        assert meta.point_count == 3
        assert meta.area == 150.5
        assert meta.updated_at == session.updated_at

    def test_points_are_immutable(self, point_factory) -> None:
        point = point_factory()

        with pytest.raises(PydanticValidationError):
            point.timestamp = 0

    def test_invalid_point_type_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            TrackedPoint(point=LatLng(lat=0, lng=0), type="drawn", timestamp=0)

    def test_index_find(self, session: SessionData) -> None:
        index = UserSessionIndex(
            last_modified="t", sessions=[SessionMeta.from_session(session)]
        )

        assert index.find("s1").name == "Area 1"
        assert index.find("s2") is None


class TestValidateSessionName:
    """Session name rules."""

    def test_trims(self) -> None:
        assert validate_session_name("  North field ") == "North field"

    def test_max_length_allowed(self) -> None:
        name = "x" * SESSION_NAME_MAX_LENGTH

        assert validate_session_name(name) == name

    @pytest.mark.parametrize("name", ["", "   ", "x" * (SESSION_NAME_MAX_LENGTH + 1)])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            validate_session_name(name)


class TestExceptions:
    """Exception hierarchy."""

    def test_validation_error_records_field(self) -> None:
        error = ValidationError("bad", field="points")

        assert isinstance(error, AreaSessionsException)
        assert error.field == "points"
        assert error.details == {"field": "points"}
        assert str(error) == "bad | Details: {'field': 'points'}"

    def test_storage_operation_error_carries_classification(self) -> None:
        error = StorageOperationError(session_not_found_error(), details={"session_id": "s1"})

        assert error.message == "Session not found"
        assert error.retry is False
        assert error.code.value == "SESSION_NOT_FOUND"
        assert error.details == {"session_id": "s1", "code": "SESSION_NOT_FOUND", "retry": False}
