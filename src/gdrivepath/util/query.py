"""Drive query (`q` parameter) builders."""

from __future__ import annotations

from typing import Optional

from .mime import FOLDER_MIME

NOT_TRASHED: str = "trashed = false"


def escape_quotes(value: str) -> str:
    """Escape backslashes and single quotes for use inside a quoted query value."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def name_query(name: str, *, folder: Optional[bool] = None) -> str:
    """
    Build a query matching non-trashed children named `name`.

    Args:
        folder: True restricts to folders, False excludes folders, None matches both.
    """
    q = f"name = '{escape_quotes(name)}' and {NOT_TRASHED}"
    if folder is True:
        q += f" and mimeType = '{FOLDER_MIME}'"
    elif folder is False:
        q += f" and mimeType != '{FOLDER_MIME}'"
    return q


def parent_query(parent_id: str, query: Optional[str] = None) -> str:
    q = f"'{escape_quotes(parent_id)}' in parents"
    if query:
        q = f"{q} and ({query})"
    return q
