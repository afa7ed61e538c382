from .ids import new_temp_name
from .mime import DEFAULT_UPLOAD_MIME, FOLDER_MIME, is_downloadable, is_folder, is_google_app
from .path import ROOT_PATH, canonical_path, is_root, join_path, prefixes, split_path
from .query import NOT_TRASHED, escape_quotes, name_query, parent_query
from .time import (
    normalize_dt,
    parse_rfc3339,
    to_drive_modified_time,
    truncate_seconds,
)

__all__ = [
    "new_temp_name",
    "FOLDER_MIME",
    "DEFAULT_UPLOAD_MIME",
    "is_folder",
    "is_google_app",
    "is_downloadable",
    "ROOT_PATH",
    "split_path",
    "canonical_path",
    "is_root",
    "join_path",
    "prefixes",
    "NOT_TRASHED",
    "escape_quotes",
    "name_query",
    "parent_query",
    "parse_rfc3339",
    "to_drive_modified_time",
    "truncate_seconds",
    "normalize_dt",
]
