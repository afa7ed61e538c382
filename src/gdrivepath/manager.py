"""GoogleDrivePath: Unix-like path access to Google Drive."""

from __future__ import annotations

import io
import logging
import os
import tempfile
from datetime import datetime
from typing import BinaryIO, Callable, Optional, Sequence

from gdrivepath.auth import AuthInfo
from gdrivepath.cache import DEFAULT_TTL_SEC, ObjectCache
from gdrivepath.controller import GoogleDriveController, RetryPolicy
from gdrivepath.errors import GDrivePathError, InvalidArgumentError, wrap_error
from gdrivepath.models import ChildRef, FileInfo
from gdrivepath.paths import DEFAULT_TMP_FOLDER, Lister, PathMutator, PathResolver
from gdrivepath.util.path import split_path

logger = logging.getLogger(__name__)


class GoogleDrivePath:
    """
    Path based access to a Google Drive account ("dir/subdir/file").

    Drive allows several items with the same name in one folder; paths
    that hit such duplicates raise DuplicateObjectError instead of picking
    one. Resolved paths are cached for `cache_ttl_sec`; changes made to Drive
    by other clients are not seen until the entries expire.

    One instance is one authenticated session. Calls are synchronous.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
        cache_ttl_sec: float = DEFAULT_TTL_SEC,
        retry_policy: Optional[RetryPolicy] = None,
        tmp_folder: str = DEFAULT_TMP_FOLDER,
    ) -> None:
        controller = GoogleDriveController(
            auth_info,
            scopes=scopes,
            supports_all_drives=supports_all_drives,
            retry_policy=retry_policy,
        )
        self._setup(controller, cache_ttl_sec=cache_ttl_sec, tmp_folder=tmp_folder, clock=None)

    @classmethod
    def from_controller(
        cls,
        controller: GoogleDriveController,
        *,
        cache_ttl_sec: float = DEFAULT_TTL_SEC,
        tmp_folder: str = DEFAULT_TMP_FOLDER,
        clock: Optional[Callable[[], float]] = None,
    ) -> "GoogleDrivePath":
        """Create an instance with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._setup(controller, cache_ttl_sec=cache_ttl_sec, tmp_folder=tmp_folder, clock=clock)
        return obj

    def _setup(
        self,
        controller: GoogleDriveController,
        *,
        cache_ttl_sec: float,
        tmp_folder: str,
        clock: Optional[Callable[[], float]],
    ) -> None:
        self._controller = controller
        self._file_cache: ObjectCache[FileInfo] = ObjectCache(cache_ttl_sec, clock=clock)
        self._child_cache: ObjectCache[ChildRef] = ObjectCache(cache_ttl_sec, clock=clock)
        self._resolver = PathResolver(
            controller,
            file_cache=self._file_cache,
            child_cache=self._child_cache,
        )
        self._mutator = PathMutator(controller, self._resolver, tmp_folder=tmp_folder)
        self._lister = Lister(controller, self._resolver)

    # ----------------------------
    # Read APIs
    # ----------------------------
    def stat(self, path: str) -> FileInfo:
        """
        Return the object at `path` ("/" is the Drive root).

        Raises ObjectNotFoundError (test with `is_object_not_found`),
        DuplicateObjectError or NotADirectoryError.
        """
        return self._resolver.stat(path)

    def list_dir(self, path: str, query: Optional[str] = None) -> list[FileInfo]:
        return self._lister.list_dir(path, query)

    def download(self, path: str) -> io.BytesIO:
        """
        Return the content of the file at `path` as an in-memory reader.

        The whole file is held in memory; use `download_to_file` for large
        files.
        """
        buf = io.BytesIO()
        self._download_into(path, buf)
        buf.seek(0)
        return buf

    def download_to_file(self, path: str, local_file: str) -> int:
        """
        Download the file at `path` into `local_file` and return the size.

        The content goes to a temporary file next to `local_file` that is
        renamed over it at the end, so `local_file` is never left half
        written. An existing `local_file` must be a regular file.
        """
        if not local_file:
            raise InvalidArgumentError("download_to_file: empty local file")
        if os.path.exists(local_file) and not os.path.isfile(local_file):
            raise InvalidArgumentError(
                f"download_to_file: local file {local_file!r} exists and is not a regular file",
                details={"local_file": local_file},
            )

        local_dir = os.path.dirname(os.path.abspath(local_file))
        fd, tmp_name = tempfile.mkstemp(prefix=".gdrivepath-", dir=local_dir)
        try:
            with os.fdopen(fd, "wb") as writer:
                written = self._download_into(path, writer)
            # mkstemp creates 0600; give the result the usual umask based mode.
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, local_file)
        except BaseException:
            os.unlink(tmp_name)
            raise

        logger.info("Downloaded %s to %s (%d bytes)", path, local_file, written)
        return written

    # ----------------------------
    # Write APIs
    # ----------------------------
    def mkdir(self, path: str) -> FileInfo:
        return self._mutator.mkdir(path)

    def move(self, src_path: str, dst_path: str) -> FileInfo:
        return self._mutator.move(src_path, dst_path)

    def insert(self, dst_path: str, reader: BinaryIO) -> FileInfo:
        return self._mutator.insert(dst_path, reader)

    def insert_in_place(self, dst_path: str, reader: BinaryIO) -> FileInfo:
        return self._mutator.insert_in_place(dst_path, reader)

    def insert_file(self, dst_path: str, local_file: str, *, in_place: bool = False) -> FileInfo:
        return self._mutator.insert_file(dst_path, local_file, in_place=in_place)

    def set_modified_date(self, path: str, modified_time: datetime) -> FileInfo:
        return self._mutator.set_modified_date(path, modified_time)

    def clear_cache(self) -> None:
        """Forget every resolved path (e.g. after out-of-band changes)."""
        self._file_cache.clear()
        self._child_cache.clear()

    # ----------------------------
    # Internals
    # ----------------------------
    def _download_into(self, path: str, writer: BinaryIO) -> int:
        _, _, canonical = split_path(path)
        if not canonical:
            raise InvalidArgumentError("download: empty source path")

        info = self._resolver.stat(canonical)
        if not info.downloadable:
            raise InvalidArgumentError(
                f"download: {canonical!r} is not downloadable (no binary content)",
                details={"path": canonical, "mime_type": info.mime_type},
            )
        try:
            return self._controller.download(info.file_id, writer)
        except GDrivePathError as exc:
            raise wrap_error(exc, "download", f"unable to download {canonical!r}") from exc


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
