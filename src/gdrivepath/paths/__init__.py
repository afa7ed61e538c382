"""Path resolution and path based operations."""

from __future__ import annotations

from .lister import Lister
from .mutator import DEFAULT_TMP_FOLDER, PathMutator
from .resolver import PathResolver

__all__ = ["PathResolver", "PathMutator", "Lister", "DEFAULT_TMP_FOLDER"]
