"""Internal controller exports for gdrivepath."""

from __future__ import annotations

from .drive_controller import ROOT_ID, GoogleDriveController
from .retry import RetryPolicy, execute_with_retry, linear_backoff, no_backoff

__all__ = [
    "GoogleDriveController",
    "ROOT_ID",
    "RetryPolicy",
    "execute_with_retry",
    "linear_backoff",
    "no_backoff",
]
