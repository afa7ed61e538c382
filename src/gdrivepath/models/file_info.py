"""Data model for Drive items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from gdrivepath.util.mime import is_downloadable, is_folder
from gdrivepath.util.time import truncate_seconds


@dataclass(slots=True, frozen=True)
class FileInfo:
    """
    A file or folder as returned by Drive.

    Instances are never mutated; operations that change an item on Drive
    return a fresh FileInfo built from the API response.
    """

    file_id: str
    name: str
    mime_type: str
    parents: tuple[str, ...] = field(default_factory=tuple)

    trashed: bool = False
    modified_time: Optional[datetime] = None
    created_time: Optional[datetime] = None
    size: Optional[int] = None
    md5_checksum: Optional[str] = None

    @property
    def is_dir(self) -> bool:
        return is_folder(self.mime_type)

    @property
    def downloadable(self) -> bool:
        return is_downloadable(self.mime_type)


@dataclass(slots=True, frozen=True)
class ChildRef:
    """Lightweight listing entry; use the controller's get() for the full item."""

    file_id: str
    name: str = ""
    mime_type: str = ""


def is_dir(info: FileInfo) -> bool:
    """Return True if `info` is a folder."""
    return info.is_dir


def create_date(info: FileInfo) -> Optional[datetime]:
    return info.created_time


def modified_date(info: FileInfo) -> Optional[datetime]:
    """
    Return the modification time truncated to whole seconds.

    Sub-second parts are dropped so that remote and local times compare equal.
    """
    if info.modified_time is None:
        return None
    return truncate_seconds(info.modified_time)
