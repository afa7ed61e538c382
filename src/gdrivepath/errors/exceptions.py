"""Exception hierarchy, HTTP error mapping and error classification for gdrivepath."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class GDrivePathError(Exception):
    """
    Base exception for gdrivepath.

    Attributes:
        details: Optional structured information (e.g., HTTP status, path).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class AuthError(GDrivePathError):
    """Raised when OAuth authentication/refresh fails."""


class PermissionError(GDrivePathError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(GDrivePathError):
    """Raised for blank paths, missing arguments and HTTP 400."""


class NotFoundError(GDrivePathError):
    """Raised when a Drive resource id is not found (HTTP 404)."""


class ConflictError(GDrivePathError):
    """Raised on HTTP 409/412 and when a move would overwrite a folder."""


class RateLimitError(GDrivePathError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(GDrivePathError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(GDrivePathError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(GDrivePathError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


class ObjectNotFoundError(GDrivePathError):
    """
    Raised when a path (or one of its directories) does not exist.

    This is an expected condition: callers such as mkdir test for it with
    `is_object_not_found` and carry on.
    """


class DuplicateObjectError(GDrivePathError):
    """
    Raised when more than one object with the same name exists under a parent.

    Drive allows this, Unix paths do not. It is never resolved automatically
    and needs manual cleanup on the Drive side.
    """


class NotADirectoryError(GDrivePathError):
    """Raised when a directory component of a path is actually a file."""


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    TYPE_MISMATCH = "type_mismatch"
    TRANSIENT = "transient"
    INVALID = "invalid"
    OTHER = "other"


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdrivepath exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_RATE_LIMIT_REASONS: tuple[str, ...] = (
    "rateLimitExceeded",
    "userRateLimitExceeded",
)

_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDrivePathError:
    """
    Map an HTTP error to a gdrivepath exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError (default), RateLimitError for rate-limit reasons,
                 QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - 5xx and anything else -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if info.reason in _RATE_LIMIT_REASONS:
            return RateLimitError(message, details=details, cause=cause)
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)


def is_transient(exc: BaseException) -> bool:
    """Return True if the failure is worth retrying (5xx, 429, network)."""
    if isinstance(exc, (RateLimitError, NetworkError)):
        return True
    if isinstance(exc, ApiError):
        status_code = exc.details.get("status_code")
        return isinstance(status_code, int) and 500 <= status_code <= 599
    return False


def is_object_not_found(exc: BaseException | None) -> bool:
    """Return True if `exc` reports a missing path."""
    return isinstance(exc, ObjectNotFoundError)


def classify_error(exc: BaseException) -> ErrorKind:
    if isinstance(exc, ObjectNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, DuplicateObjectError):
        return ErrorKind.DUPLICATE
    if isinstance(exc, NotADirectoryError):
        return ErrorKind.TYPE_MISMATCH
    if is_transient(exc):
        return ErrorKind.TRANSIENT
    if isinstance(exc, InvalidArgumentError):
        return ErrorKind.INVALID
    return ErrorKind.OTHER


def wrap_error(exc: GDrivePathError, operation: str, message: str) -> GDrivePathError:
    """
    Return a copy of `exc` carrying operation context.

    The class and details are preserved so `classify_error` still works on the
    wrapped error.
    """
    details = dict(exc.details)
    details.setdefault("operation", operation)
    return type(exc)(f"{operation}: {message}: {exc}", details=details, cause=exc)
