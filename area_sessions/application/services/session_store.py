"""
Session store orchestrator.

Coordinates session CRUD over the blob store and keeps the per-user index
in step with the session blobs. Every read runs through schema migration,
every failure through the storage error mapper.

Consistency protocol: the session blob is written before the index. A blob
with no index entry is invisible but harmless; an index entry whose blob is
missing surfaces as SESSION_NOT_FOUND on load and is repaired with
remove_from_index(). There is no two-phase commit and no locking: concurrent
index writers race and the last write wins.

Dependencies: area_sessions.boundary, area_sessions.core, area_sessions.models
System role: Session persistence use case orchestration
"""

import asyncio
import json
import logging
import uuid
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import asynccontextmanager
from typing import Any

from botocore.exceptions import ClientError

from area_sessions.boundary.blob.blob_store import JSON_CONTENT_TYPE, BlobStore
from area_sessions.boundary.storage_paths import index_path, session_path, sessions_prefix
from area_sessions.core.clock import now_iso
from area_sessions.core.exceptions import StorageOperationError, ValidationError
from area_sessions.core.session_migration import empty_index, migrate_index, migrate_session_data
from area_sessions.core.storage_errors import (
    is_object_not_found,
    map_storage_error,
    not_authenticated_error,
    session_not_found_error,
)
from area_sessions.models.session import (
    CURRENT_SCHEMA_VERSION,
    DocumentModel,
    SessionData,
    SessionMeta,
    TrackedPoint,
    UserSessionIndex,
    validate_session_name,
)
from area_sessions.models.storage_error import StorageError
from area_sessions.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

IdentityProvider = Callable[[], str | None]


class SessionStore:
    """
    Per-user session persistence.

    Owns two pieces of observable state for its caller: `loading` (an
    operation is in flight) and `error` (the last failure, cleared when a
    new operation starts). Single-owner: use one instance per event loop.
    """

    def __init__(self, blob_store: BlobStore, identity: IdentityProvider) -> None:
        """
        Initialize session store.

        Args:
            blob_store: Object storage for index and session documents
            identity: Returns the signed-in user id, or None when signed out
        """
        self._blob_store = blob_store
        self._identity = identity
        self._loading = False
        self._error: StorageError | None = None

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> StorageError | None:
        return self._error

    def clear_error(self) -> None:
        self._error = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_user(self) -> str:
        uid = self._identity()
        if not uid:
            error = not_authenticated_error()
            self._error = error
            raise StorageOperationError(error)
        return uid

    @staticmethod
    def _require_points(points: Sequence[TrackedPoint]) -> None:
        if not points:
            logger.error(f"{__name__}:_require_points - Attempted to save session with no points")
            raise ValidationError("Cannot save session with no points", field="points")

    @staticmethod
    def _require_name(name: str) -> str:
        try:
            return validate_session_name(name)
        except ValueError as e:
            raise ValidationError(str(e), field="name") from e

    @asynccontextmanager
    async def _operation(self, operation: str, **context: Any) -> AsyncIterator[None]:
        """Track loading/error state and funnel failures through the error mapper."""
        self._loading = True
        self._error = None
        try:
            yield
        except StorageOperationError as e:
            self._error = e.error
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:{operation} - Failed: {e.error.code.value}",
                operation=operation,
                code=e.error.code.value,
                **context,
            )
            raise
        except Exception as e:
            error = map_storage_error(e)
            self._error = error
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:{operation} - Failed: {error.code.value} ({type(e).__name__}: {e})",
                operation=operation,
                code=error.code.value,
                error_type=type(e).__name__,
                **context,
            )
            raise StorageOperationError(error, details={"operation": operation}) from e
        finally:
            self._loading = False

    async def _write_document(self, path: str, document: DocumentModel) -> None:
        payload = json.dumps(document.to_document()).encode("utf-8")
        await self._blob_store.write(path, payload, JSON_CONTENT_TYPE)

    async def _read_session(self, uid: str, session_id: str) -> SessionData:
        raw = await self._blob_store.read(session_path(uid, session_id))
        session = migrate_session_data(json.loads(raw))
        if not session.id:
            # Legacy blobs may lack an id; the path is authoritative
            session = session.model_copy(update={"id": session_id})
        return session

    async def _fetch_index_internal(self, uid: str) -> UserSessionIndex | None:
        """
        Fetch and migrate the index without touching loading/error state.

        Returns None when the index does not exist yet. A corrupted index
        yields an empty index; the stored document is left as is.
        """
        try:
            raw = await self._blob_store.read(index_path(uid))
        except ClientError as e:
            if is_object_not_found(e):
                return None
            raise

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.error(
                f"{__name__}:_fetch_index_internal - Index file is corrupted, "
                f"returning empty index: {e}",
                extra={"user_id": uid},
            )
            return empty_index()

        # A bare list is the legacy v0 index shape
        if not isinstance(data, (dict, list)):
            logger.error(
                f"{__name__}:_fetch_index_internal - Index data is not an object, "
                "returning empty index",
                extra={"user_id": uid},
            )
            return empty_index()

        if isinstance(data, dict) and data.get("sessions") is not None and not isinstance(
            data["sessions"], list
        ):
            logger.error(
                f"{__name__}:_fetch_index_internal - Index sessions is not an array, "
                "returning empty index",
                extra={"user_id": uid},
            )
            return empty_index()

        return migrate_index(data)

    async def _write_index(self, uid: str, index: UserSessionIndex) -> None:
        await self._write_document(index_path(uid), index)

    # ------------------------------------------------------------------
    # Index operations
    # ------------------------------------------------------------------

    async def fetch_index(self) -> UserSessionIndex | None:
        """
        Fetch the user's session index.

        Returns:
            UserSessionIndex | None: Migrated index, or None if the user has
            never saved a session

        Raises:
            StorageOperationError: NOT_AUTHENTICATED or a mapped storage failure
        """
        uid = self._require_user()
        async with self._operation("fetch_index", user_id=uid):
            return await self._fetch_index_internal(uid)

    async def remove_from_index(self, session_id: str) -> None:
        """
        Remove a session entry from the index without touching its blob.

        Repair operation for entries whose blob is missing. The index is
        rewritten only if an entry was actually removed.

        Args:
            session_id: Session to drop from the index

        Raises:
            StorageOperationError: NOT_AUTHENTICATED or a mapped storage failure
        """
        uid = self._require_user()
        async with self._operation("remove_from_index", user_id=uid, session_id=session_id):
            index = await self._fetch_index_internal(uid)
            if index is None:
                return

            remaining = [s for s in index.sessions if s.id != session_id]
            if len(remaining) == len(index.sessions):
                return

            await self._write_index(
                uid,
                index.model_copy(update={"sessions": remaining, "last_modified": now_iso()}),
            )
            logger.info(
                f"{__name__}:remove_from_index - Removed missing session from index "
                f"session_id={session_id}"
            )

    # ------------------------------------------------------------------
    # Session CRUD
    # ------------------------------------------------------------------

    async def save_new_session(
        self,
        name: str,
        points: Sequence[TrackedPoint],
        area: float,
    ) -> SessionMeta:
        """
        Save points as a new session and list it in the index.

        Args:
            name: Session name (trimmed, 1-100 characters)
            points: Recorded points, at least one
            area: Computed area in square meters

        Returns:
            SessionMeta: The index entry that was written

        Raises:
            ValidationError: If points is empty or the name is invalid
            StorageOperationError: NOT_AUTHENTICATED or a mapped storage failure
        """
        uid = self._require_user()
        self._require_points(points)
        trimmed_name = self._require_name(name)

        async with self._operation("save_new_session", user_id=uid):
            now = now_iso()
            session = SessionData(
                id=str(uuid.uuid4()),
                name=trimmed_name,
                created_at=now,
                updated_at=now,
                schema_version=CURRENT_SCHEMA_VERSION,
                points=list(points),
                area=area,
            )
            meta = SessionMeta.from_session(session)

            await self._write_document(session_path(uid, session.id), session)

            index = await self._fetch_index_internal(uid) or empty_index()
            await self._write_index(
                uid,
                index.model_copy(update={"sessions": [*index.sessions, meta], "last_modified": now}),
            )

            logger.info(
                f"{__name__}:save_new_session - Saved session_id={session.id}, "
                f"points={meta.point_count}"
            )
            return meta

    async def update_session(
        self,
        session_id: str,
        points: Sequence[TrackedPoint],
        area: float,
    ) -> SessionMeta:
        """
        Replace a session's points and area.

        Name, createdAt and notes are preserved from the stored blob. The
        index entry is replaced, or appended if the index lost it.

        Args:
            session_id: Existing session id
            points: Recorded points, at least one
            area: Computed area in square meters

        Returns:
            SessionMeta: The index entry that was written

        Raises:
            ValidationError: If points is empty
            StorageOperationError: NOT_AUTHENTICATED, SESSION_NOT_FOUND or a
            mapped storage failure
        """
        uid = self._require_user()
        self._require_points(points)

        async with self._operation("update_session", user_id=uid, session_id=session_id):
            now = now_iso()
            existing = await self._read_session(uid, session_id)

            session = SessionData(
                id=session_id,
                name=existing.name,
                created_at=existing.created_at,
                updated_at=now,
                schema_version=CURRENT_SCHEMA_VERSION,
                points=list(points),
                area=area,
                notes=existing.notes,
            )
            meta = SessionMeta.from_session(session)

            await self._write_document(session_path(uid, session_id), session)

            index = await self._fetch_index_internal(uid) or empty_index()
            if index.find(session_id) is not None:
                sessions = [meta if s.id == session_id else s for s in index.sessions]
            else:
                logger.warning(
                    f"{__name__}:update_session - Session missing from index, "
                    f"re-adding session_id={session_id}"
                )
                sessions = [*index.sessions, meta]

            await self._write_index(
                uid, index.model_copy(update={"sessions": sessions, "last_modified": now})
            )
            return meta

    async def load_session(self, session_id: str) -> SessionData:
        """
        Load and migrate a full session.

        Args:
            session_id: Session id from the index

        Returns:
            SessionData: Session at the current schema version

        Raises:
            StorageOperationError: SESSION_NOT_FOUND when the blob is missing
            (callers may offer remove_from_index), NOT_AUTHENTICATED, or a
            mapped storage failure
        """
        uid = self._require_user()
        async with self._operation("load_session", user_id=uid, session_id=session_id):
            try:
                return await self._read_session(uid, session_id)
            except ClientError as e:
                if is_object_not_found(e):
                    logger.error(
                        f"{__name__}:load_session - Session file not found "
                        f"session_id={session_id}"
                    )
                    raise StorageOperationError(
                        session_not_found_error(), details={"session_id": session_id}
                    ) from e
                raise

    async def rename_session(self, session_id: str, new_name: str) -> None:
        """
        Rename a session in its blob and index entry.

        Args:
            session_id: Existing session id
            new_name: New name (trimmed, 1-100 characters)

        Raises:
            ValidationError: If the name is invalid
            StorageOperationError: NOT_AUTHENTICATED, SESSION_NOT_FOUND or a
            mapped storage failure
        """
        uid = self._require_user()
        trimmed_name = self._require_name(new_name)

        async with self._operation("rename_session", user_id=uid, session_id=session_id):
            now = now_iso()
            existing = await self._read_session(uid, session_id)

            await self._write_document(
                session_path(uid, session_id),
                existing.model_copy(update={"name": trimmed_name, "updated_at": now}),
            )

            index = await self._fetch_index_internal(uid)
            if index is None or index.find(session_id) is None:
                return

            sessions = [
                s.model_copy(update={"name": trimmed_name, "updated_at": now})
                if s.id == session_id
                else s
                for s in index.sessions
            ]
            await self._write_index(
                uid, index.model_copy(update={"sessions": sessions, "last_modified": now})
            )

    async def delete_session(self, session_id: str) -> None:
        """
        Delete a session blob and its index entry.

        Args:
            session_id: Session to delete

        Raises:
            StorageOperationError: NOT_AUTHENTICATED, SESSION_NOT_FOUND or a
            mapped storage failure
        """
        uid = self._require_user()
        async with self._operation("delete_session", user_id=uid, session_id=session_id):
            await self._blob_store.delete(session_path(uid, session_id))

            index = await self._fetch_index_internal(uid)
            if index is None:
                return

            await self._write_index(
                uid,
                index.model_copy(
                    update={
                        "sessions": [s for s in index.sessions if s.id != session_id],
                        "last_modified": now_iso(),
                    }
                ),
            )
            logger.info(f"{__name__}:delete_session - Deleted session_id={session_id}")

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    async def delete_all_sessions(self) -> None:
        """
        Delete every session blob of the user, then the index.

        A missing index is tolerated.

        Raises:
            StorageOperationError: NOT_AUTHENTICATED or a mapped storage failure
        """
        uid = self._require_user()
        async with self._operation("delete_all_sessions", user_id=uid):
            paths = await self._blob_store.list_all(sessions_prefix(uid))
            results = await asyncio.gather(
                *(self._blob_store.delete(path) for path in paths),
                return_exceptions=True,
            )
            failures = [r for r in results if isinstance(r, BaseException)]
            if failures:
                logger.warning(
                    f"{__name__}:delete_all_sessions - {len(failures)} of {len(paths)} "
                    "session deletes failed"
                )
                raise failures[0]

            try:
                await self._blob_store.delete(index_path(uid))
            except ClientError as e:
                if not is_object_not_found(e):
                    raise

            logger.info(
                f"{__name__}:delete_all_sessions - Deleted {len(paths)} sessions and index"
            )
