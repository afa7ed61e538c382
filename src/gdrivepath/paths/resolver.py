"""Path -> Drive object resolution."""

from __future__ import annotations

import logging
from typing import Protocol

from gdrivepath.cache import ObjectCache
from gdrivepath.controller import ROOT_ID
from gdrivepath.errors import (
    DuplicateObjectError,
    InvalidArgumentError,
    NotADirectoryError,
    ObjectNotFoundError,
)
from gdrivepath.models import ChildRef, FileInfo
from gdrivepath.util.path import ROOT_PATH, canonical_path, is_root, prefixes, split_path
from gdrivepath.util.query import name_query

logger = logging.getLogger(__name__)


class DriveStore(Protocol):
    """The subset of GoogleDriveController used by the path layer."""

    def get(self, file_id: str) -> FileInfo: ...

    def list_children(self, parent_id: str, query: str | None = None) -> list[ChildRef]: ...


class PathResolver:
    """
    Resolve Unix-like paths ("dir/subdir/file") to Drive objects.

    Drive names are not unique among siblings and Drive has no path lookup,
    so every directory level costs up to two filtered listings. Two caches
    keep repeated lookups cheap:

        - `file_cache`: canonical path -> FileInfo of fully resolved paths.
        - `child_cache`: directory prefix -> ChildRef of the folder, so a
          lookup below an already-walked prefix starts from there instead of
          from root.

    The caches are owned by the resolver; mutating operations keep them in
    sync through `remember` and `forget`.
    """

    def __init__(
        self,
        store: DriveStore,
        *,
        file_cache: ObjectCache[FileInfo],
        child_cache: ObjectCache[ChildRef],
    ) -> None:
        self._store = store
        self._file_cache = file_cache
        self._child_cache = child_cache

    def stat(self, path: str) -> FileInfo:
        """
        Return the FileInfo of the object at `path`.

        Raises:
            InvalidArgumentError: blank path.
            ObjectNotFoundError: a directory or the leaf does not exist.
            NotADirectoryError: a directory component is a file.
            DuplicateObjectError: a directory or the leaf exists more than once.
        """
        if is_root(path):
            return self._stat_root()

        directory, leaf, canonical = split_path(path)
        if not canonical:
            raise InvalidArgumentError("stat: blank path")

        cached = self._file_cache.get(canonical)
        if cached is not None:
            logger.debug("stat %s: cache hit", canonical)
            return cached

        parent = self._walk(directory, canonical)

        matches = self._store.list_children(parent, name_query(leaf))
        if not matches:
            raise ObjectNotFoundError(
                f"stat: object {canonical!r} not found",
                details={"path": canonical},
            )
        if len(matches) > 1:
            raise DuplicateObjectError(
                f"stat: more than one object named {leaf!r} exists in {canonical!r}",
                details={"path": canonical, "name": leaf, "count": len(matches)},
            )

        info = self._store.get(matches[0].file_id)
        self.remember(canonical, info)
        return info

    def stat_dir(self, directory: str) -> FileInfo:
        """Like stat, but a blank directory means root and a file is rejected."""
        if not canonical_path(directory):
            return self._stat_root()
        info = self.stat(directory)
        if not info.is_dir:
            raise NotADirectoryError(
                f"stat: {canonical_path(directory)!r} is a file, not a directory",
                details={"path": canonical_path(directory)},
            )
        return info

    def remember(self, path: str, info: FileInfo) -> None:
        """Cache `info` as the object living at `path`."""
        canonical = canonical_path(path) or ROOT_PATH
        self._file_cache.put(canonical, info)
        if info.is_dir and canonical != ROOT_PATH:
            self._child_cache.put(
                canonical,
                ChildRef(file_id=info.file_id, name=info.name, mime_type=info.mime_type),
            )

    def forget(self, path: str) -> None:
        """Drop `path` and everything cached below it."""
        canonical = canonical_path(path)
        if not canonical:
            return
        self._file_cache.delete_tree(canonical)
        self._child_cache.delete_tree(canonical)

    # ----------------------------
    # Internals
    # ----------------------------
    def _stat_root(self) -> FileInfo:
        cached = self._file_cache.get(ROOT_PATH)
        if cached is not None:
            return cached
        info = self._store.get(ROOT_ID)
        self._file_cache.put(ROOT_PATH, info)
        return info

    def _walk(self, directory: str, canonical: str) -> str:
        """Return the id of the last folder in `directory` (root if blank)."""
        parent = ROOT_ID
        for segment, prefix in prefixes(directory):
            ref = self._child_cache.get(prefix)
            if ref is not None:
                parent = ref.file_id
                continue

            files = self._store.list_children(parent, name_query(segment, folder=False))
            if files:
                raise NotADirectoryError(
                    f"stat: element {segment!r} in path {canonical!r} is a file, not a directory",
                    details={"path": canonical, "name": segment},
                )

            folders = self._store.list_children(parent, name_query(segment, folder=True))
            if not folders:
                raise ObjectNotFoundError(
                    f"stat: missing directory {segment!r} in path {canonical!r}",
                    details={"path": canonical, "name": segment},
                )
            if len(folders) > 1:
                raise DuplicateObjectError(
                    f"stat: more than one directory named {segment!r} exists in path {canonical!r}",
                    details={"path": canonical, "name": segment, "count": len(folders)},
                )

            parent = folders[0].file_id
            self._child_cache.put(prefix, folders[0])
            logger.debug("Resolved %s -> %s", prefix, parent)
        return parent
