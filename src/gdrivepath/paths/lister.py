"""Directory listing by path."""

from __future__ import annotations

import logging
from typing import Optional

from gdrivepath.errors import GDrivePathError, NotADirectoryError, wrap_error
from gdrivepath.models import FileInfo
from gdrivepath.util.query import NOT_TRASHED

from .resolver import DriveStore, PathResolver

logger = logging.getLogger(__name__)


class Lister:
    def __init__(self, store: DriveStore, resolver: PathResolver) -> None:
        self._store = store
        self._resolver = resolver

    def list_dir(self, path: str, query: Optional[str] = None) -> list[FileInfo]:
        """
        Return the children of the folder at `path` matching `query`.

        `query` uses the Drive query language; it defaults to non-trashed
        items. Listings only carry ids, so each child is fetched in full.
        """
        folder = self._resolver.stat(path)
        if not folder.is_dir:
            raise NotADirectoryError(
                f"list_dir: {path!r} is not a directory",
                details={"path": path},
            )

        try:
            refs = self._store.list_children(folder.file_id, query or NOT_TRASHED)
            children = [self._store.get(ref.file_id) for ref in refs]
        except GDrivePathError as exc:
            raise wrap_error(exc, "list_dir", f"unable to list {path!r}") from exc

        logger.debug("list_dir %s: %d item(s)", path, len(children))
        return children
