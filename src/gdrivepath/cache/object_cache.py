"""TTL object cache keyed by canonical Drive path."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

V = TypeVar("V")

DEFAULT_TTL_SEC: float = 60.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry(Generic[V]):
    value: V
    timestamp: float


class ObjectCache(Generic[V]):
    """
    Key -> value cache where each entry expires `ttl_sec` after it was stored.

    Expired entries are evicted lazily on lookup. There is no size bound; a
    session's working set is expected to stay small. Access is serialized by
    a lock so a single session can be shared between threads.
    """

    def __init__(
        self,
        ttl_sec: float = DEFAULT_TTL_SEC,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if ttl_sec < 0:
            raise ValueError("ttl_sec must be >= 0")
        self._ttl_sec = ttl_sec
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry[V]] = {}

    @property
    def ttl_sec(self) -> float:
        return self._ttl_sec

    def put(self, key: str, value: V) -> None:
        """Add or replace `key`, restarting its TTL."""
        with self._lock:
            self._entries[key] = _Entry(value, self._clock())

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.timestamp >= self._ttl_sec:
                del self._entries[key]
                logger.debug("Cache entry expired: %s", key)
                return None
            return entry.value

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def delete_tree(self, key: str) -> None:
        """Remove `key` and every entry below it ("key/...")."""
        prefix = key + "/"
        with self._lock:
            stale = [k for k in self._entries if k == key or k.startswith(prefix)]
            for k in stale:
                del self._entries[k]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
