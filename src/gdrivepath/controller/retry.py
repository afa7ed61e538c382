"""Retry wrapper for Drive API calls."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from gdrivepath.errors import ApiError, is_transient

T = TypeVar("T")

Backoff = Callable[[int], float]

logger = logging.getLogger(__name__)


def linear_backoff(step_sec: float = 1.0) -> Backoff:
    """Sleep `step_sec * attempt` after the n-th failed attempt."""

    def _delay(attempt: int) -> float:
        return step_sec * attempt

    return _delay


def no_backoff(attempt: int) -> float:
    return 0.0


@dataclass(frozen=True)
class RetryPolicy:
    """
    Attributes:
        max_attempts: Total number of calls, including the first one.
        backoff: Maps the 1-based number of the failed attempt to a delay (seconds).
    """

    max_attempts: int = 3
    backoff: Backoff = field(default_factory=linear_backoff)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")


def execute_with_retry(
    func: Callable[[], T],
    *,
    policy: RetryPolicy,
    map_exception: Callable[[Exception], Exception],
) -> T:
    """
    Call `func`, retrying transient failures (5xx, 429, network).

    Every exception is passed through `map_exception` first. Non-transient
    errors are raised immediately; when attempts run out the last mapped error
    is raised.
    """
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return func()
        except Exception as exc:
            mapped = map_exception(exc)
            if is_transient(mapped) and attempt < policy.max_attempts:
                delay = policy.backoff(attempt)
                logger.warning(
                    "Transient Drive error (attempt %d/%d), retrying in %.1fs: %s",
                    attempt,
                    policy.max_attempts,
                    delay,
                    mapped,
                )
                if delay > 0:
                    time.sleep(delay)
                continue
            raise mapped from exc

    raise ApiError("Unexpected retry loop termination")
