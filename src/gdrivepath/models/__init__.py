"""Public model exports for gdrivepath."""

from __future__ import annotations

from .file_info import ChildRef, FileInfo, create_date, is_dir, modified_date

__all__ = [
    "FileInfo",
    "ChildRef",
    "is_dir",
    "create_date",
    "modified_date",
]
