"""Partial-response `fields` selectors sent with Drive requests."""

from __future__ import annotations

# Everything FileInfo carries; used by get/create/update.
FILE_FIELDS: str = ",".join(
    (
        "id",
        "name",
        "mimeType",
        "parents",
        "trashed",
        "modifiedTime",
        "createdTime",
        "size",
        "md5Checksum",
    )
)

# Listings only identify children; callers get() the one they keep.
CHILD_FIELDS: str = "id,name,mimeType"

LIST_FIELDS: str = f"nextPageToken,files({CHILD_FIELDS})"
