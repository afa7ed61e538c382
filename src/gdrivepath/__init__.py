"""gdrivepath public API."""

from __future__ import annotations

from gdrivepath.auth import AuthInfo, OAuthClient
from gdrivepath.cache import ObjectCache
from gdrivepath.controller import RetryPolicy, linear_backoff, no_backoff
from gdrivepath.errors import (
    ApiError,
    AuthError,
    ConflictError,
    DuplicateObjectError,
    ErrorKind,
    GDrivePathError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotADirectoryError,
    NotFoundError,
    ObjectNotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    classify_error,
    is_object_not_found,
    map_http_error,
)
from gdrivepath.manager import GoogleDrivePath
from gdrivepath.models import ChildRef, FileInfo, create_date, is_dir, modified_date
from gdrivepath.util.path import split_path

__all__ = [
    # High-level
    "GoogleDrivePath",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Config
    "RetryPolicy",
    "linear_backoff",
    "no_backoff",
    "ObjectCache",
    # Models / helpers
    "FileInfo",
    "ChildRef",
    "is_dir",
    "create_date",
    "modified_date",
    "split_path",
    # Errors
    "GDrivePathError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "ObjectNotFoundError",
    "DuplicateObjectError",
    "NotADirectoryError",
    "ErrorKind",
    "HttpErrorInfo",
    "classify_error",
    "is_object_not_found",
    "map_http_error",
]
