"""Cache exports for gdrivepath."""

from __future__ import annotations

from .object_cache import DEFAULT_TTL_SEC, ObjectCache

__all__ = ["ObjectCache", "DEFAULT_TTL_SEC"]
