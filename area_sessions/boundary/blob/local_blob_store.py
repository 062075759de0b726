"""
Local filesystem blob store.

Development backend with the same contract as S3BlobStore: object paths
map to files under a root directory, and missing objects raise the same
NoSuchKey ClientError.

Dependencies: botocore (error vocabulary)
System role: Offline stand-in for S3 during development and tests
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from area_sessions.boundary.blob.blob_store import JSON_CONTENT_TYPE, object_not_found

logger = logging.getLogger(__name__)


class LocalBlobStore:
    """Blob store rooted at a local directory."""

    def __init__(self, root: str | Path) -> None:
        """
        Initialize local blob store.

        Args:
            root: Directory holding all objects (created on first write)
        """
        self._root = Path(root).resolve()
        logger.info(f"{__name__}:__init__ - Using local blob store root={self._root}")

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: str) -> Path:
        target = (self._root / path.lstrip("/")).resolve()
        # Only ever touch files under the store root
        try:
            target.relative_to(self._root)
        except ValueError:
            raise ValueError(f"Path escapes blob store root: {path}") from None
        return target

    def _write(self, path: str, data: bytes) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        # Temp file is unique per write; concurrent writers never share one
        fd, tmp = tempfile.mkstemp(dir=target.parent, prefix=f"{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as tmp_file:
                tmp_file.write(data)
            os.replace(tmp, target)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    async def write(self, path: str, data: bytes, content_type: str = JSON_CONTENT_TYPE) -> None:
        """Create or overwrite the file for path. content_type is not stored."""
        await asyncio.to_thread(self._write, path, data)

    def _read(self, path: str) -> bytes:
        target = self._resolve(path)
        try:
            return target.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise object_not_found(path, "GetObject") from e

    async def read(self, path: str) -> bytes:
        """Return the file's bytes; raises NoSuchKey when absent."""
        return await asyncio.to_thread(self._read, path)

    def _delete(self, path: str) -> None:
        target = self._resolve(path)
        try:
            target.unlink()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise object_not_found(path, "DeleteObject") from e

    async def delete(self, path: str) -> None:
        """Delete the file; raises NoSuchKey when absent."""
        await asyncio.to_thread(self._delete, path)

    def _list(self, prefix: str) -> list[str]:
        base = self._resolve(prefix)
        search_dir = base if prefix.endswith("/") else base.parent
        if not search_dir.is_dir():
            return []
        keys = []
        for file in sorted(search_dir.rglob("*")):
            if not file.is_file() or file.name.endswith(".tmp"):
                continue
            key = file.relative_to(self._root).as_posix()
            if key.startswith(prefix.lstrip("/")):
                keys.append(key)
        return keys

    async def list_all(self, prefix: str) -> list[str]:
        """Return every stored path under prefix."""
        return await asyncio.to_thread(self._list, prefix)
