"""Path based mutations: mkdir, move, insert, set_modified_date."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import BinaryIO, Optional, Protocol, Sequence

from gdrivepath.errors import (
    ConflictError,
    GDrivePathError,
    InvalidArgumentError,
    ObjectNotFoundError,
    wrap_error,
)
from gdrivepath.models import FileInfo
from gdrivepath.util.ids import new_temp_name
from gdrivepath.util.path import canonical_path, join_path, split_path

from .resolver import DriveStore, PathResolver

# Folder (below root) holding uploads until they are moved into place.
DEFAULT_TMP_FOLDER: str = "tmp"

logger = logging.getLogger(__name__)


class MutableDriveStore(DriveStore, Protocol):
    def insert(
        self,
        reader: Optional[BinaryIO],
        name: str,
        parent_id: str,
        *,
        mime_type: Optional[str] = None,
    ) -> FileInfo: ...

    def create_folder(self, name: str, parent_id: str) -> FileInfo: ...

    def patch(
        self,
        file_id: str,
        *,
        name: Optional[str] = None,
        modified_time: Optional[datetime] = None,
        add_parents: Optional[Sequence[str]] = None,
        remove_parents: Optional[Sequence[str]] = None,
    ) -> FileInfo: ...

    def trash(self, file_id: str) -> FileInfo: ...


class PathMutator:
    """
    Compound write operations on paths.

    Each operation resolves one or more paths, issues the Drive calls and
    updates the resolver's caches before returning. A failure in any step
    aborts the operation; nothing already done on Drive is rolled back.
    """

    def __init__(
        self,
        store: MutableDriveStore,
        resolver: PathResolver,
        *,
        tmp_folder: str = DEFAULT_TMP_FOLDER,
    ) -> None:
        _, _, tmp = split_path(tmp_folder)
        if not tmp:
            raise InvalidArgumentError("tmp_folder must be a non-blank path")
        self._store = store
        self._resolver = resolver
        self._tmp_folder = tmp

    def mkdir(self, path: str) -> FileInfo:
        """
        Create the folder at `path` and return it.

        If `path` already exists its object is returned unchanged. Parent
        folders are not created.
        """
        directory, name, canonical = split_path(path)
        if not canonical:
            raise InvalidArgumentError("mkdir: attempting to create a blank directory")

        existing = self._stat_or_none(canonical)
        if existing is not None:
            return existing

        parent = self._resolver.stat_dir(directory)
        try:
            info = self._store.create_folder(name, parent.file_id)
        except GDrivePathError as exc:
            raise wrap_error(exc, "mkdir", f"unable to create {canonical!r}") from exc

        logger.info("Created folder %s (%s)", canonical, info.file_id)
        self._resolver.remember(canonical, info)
        return info

    def move(self, src_path: str, dst_path: str) -> FileInfo:
        """
        Move/rename the object at `src_path` (file or folder) to `dst_path`.

        An existing file at `dst_path` is trashed first; an existing folder
        there is an error. Returns the moved object.
        """
        src_dir, _, src = split_path(src_path)
        dst_dir, dst_name, dst = split_path(dst_path)
        if not src or not dst:
            raise InvalidArgumentError("move: source and destination paths must be set")

        src_parent = self._resolver.stat_dir(src_dir)
        src_obj = self._resolver.stat(src)
        dst_parent = self._resolver.stat_dir(dst_dir)

        existing = self._stat_or_none(dst)
        if existing is not None:
            if existing.file_id == src_obj.file_id:
                return src_obj
            if existing.is_dir:
                raise ConflictError(
                    f"move: destination {dst!r} is an existing directory",
                    details={"src": src, "dst": dst},
                )
            self._trash(existing, dst, "move")

        add_parents = None
        remove_parents = None
        if dst_parent.file_id != src_parent.file_id:
            add_parents = [dst_parent.file_id]
            remove_parents = [src_parent.file_id]
        new_name = dst_name if dst_name != src_obj.name else None

        if add_parents is None and new_name is None:
            moved = src_obj
        else:
            try:
                moved = self._store.patch(
                    src_obj.file_id,
                    name=new_name,
                    add_parents=add_parents,
                    remove_parents=remove_parents,
                )
            except GDrivePathError as exc:
                self._resolver.forget(src)
                raise wrap_error(exc, "move", f"unable to move {src!r} to {dst!r}") from exc

        logger.info("Moved %s -> %s", src, dst)
        self._resolver.forget(src)
        self._resolver.remember(dst, moved)
        return moved

    def insert(self, dst_path: str, reader: BinaryIO) -> FileInfo:
        """
        Upload `reader` to `dst_path` through the temporary folder.

        The content is uploaded under a random name into the temporary folder
        (created when missing) and then moved into place, so `dst_path` never
        shows a partial upload.
        """
        return self._insert(dst_path, reader, in_place=False)

    def insert_in_place(self, dst_path: str, reader: BinaryIO) -> FileInfo:
        """
        Upload `reader` straight to `dst_path`.

        Any existing object at `dst_path` is trashed first, so the path is
        briefly missing. Faster than `insert`.
        """
        return self._insert(dst_path, reader, in_place=True)

    def insert_file(self, dst_path: str, local_file: str, *, in_place: bool = False) -> FileInfo:
        """Upload a local file and copy its modification time to Drive."""
        if not local_file:
            raise InvalidArgumentError("insert_file: local file must be set")
        if not os.path.isfile(local_file):
            raise InvalidArgumentError(
                f"insert_file: {local_file!r} is not a regular file",
                details={"local_file": local_file},
            )

        mtime = datetime.fromtimestamp(os.stat(local_file).st_mtime, tz=timezone.utc)
        with open(local_file, "rb") as reader:
            self._insert(dst_path, reader, in_place=in_place)
        return self.set_modified_date(dst_path, mtime)

    def set_modified_date(self, path: str, modified_time: datetime) -> FileInfo:
        """Set the modification time of `path` (truncated to whole seconds)."""
        canonical = canonical_path(path) or path
        info = self._resolver.stat(path)
        try:
            patched = self._store.patch(info.file_id, modified_time=modified_time)
        except GDrivePathError as exc:
            raise wrap_error(
                exc, "set_modified_date", f"unable to set modified time of {canonical!r}"
            ) from exc
        self._resolver.remember(path, patched)
        return patched

    # ----------------------------
    # Internals
    # ----------------------------
    def _insert(self, dst_path: str, reader: BinaryIO, *, in_place: bool) -> FileInfo:
        dst_dir, dst_name, dst = split_path(dst_path)
        if not dst:
            raise InvalidArgumentError("insert: empty destination path")
        if reader is None:
            raise InvalidArgumentError("insert: reader must be set")

        if in_place:
            parent = self._stat_parent(dst_dir, "insert")
            out_name, out_path = dst_name, dst
        else:
            # Fail before uploading if the destination directory is missing.
            self._stat_parent(dst_dir, "insert")
            parent = self.mkdir(self._tmp_folder)
            out_name = new_temp_name()
            out_path = join_path(self._tmp_folder, out_name)

        existing = self._stat_or_none(out_path)
        if existing is not None:
            self._trash(existing, out_path, "insert")

        try:
            info = self._store.insert(reader, out_name, parent.file_id)
        except GDrivePathError as exc:
            raise wrap_error(exc, "insert", f"unable to upload {out_path!r}") from exc
        self._resolver.remember(out_path, info)

        if not in_place:
            info = self.move(out_path, dst)
        return info

    def _stat_parent(self, directory: str, operation: str) -> FileInfo:
        try:
            return self._resolver.stat_dir(directory)
        except GDrivePathError as exc:
            raise wrap_error(
                exc, operation, f"unable to stat destination directory {directory!r}"
            ) from exc

    def _stat_or_none(self, path: str) -> Optional[FileInfo]:
        try:
            return self._resolver.stat(path)
        except ObjectNotFoundError:
            return None

    def _trash(self, info: FileInfo, path: str, operation: str) -> None:
        try:
            self._store.trash(info.file_id)
        except GDrivePathError as exc:
            raise wrap_error(
                exc, operation, f"unable to remove existing object {path!r}"
            ) from exc
        self._resolver.forget(path)
