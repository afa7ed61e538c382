"""Public error exports for gdrivepath."""

from __future__ import annotations

from .exceptions import (
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
    is_transient,
    map_http_error,
    wrap_error,
)

__all__ = [
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
    "is_transient",
    "map_http_error",
    "wrap_error",
]
