"""Unix-like path helpers for Drive paths."""

from __future__ import annotations

ROOT_PATH: str = "/"


def split_path(path: str) -> tuple[str, str, str]:
    """
    Split a slash separated path into (directory, leaf, canonical path).

    Repeated, leading and trailing slashes are dropped. A blank path (or one
    made only of slashes) yields three empty strings. A single segment has an
    empty directory: Drive has no working directory, so the caller treats an
    empty directory as root.

        split_path("/a//b/c/") -> ("a/b", "c", "a/b/c")
        split_path("c")        -> ("", "c", "c")
        split_path("")         -> ("", "", "")
    """
    parts = [p for p in path.split("/") if p]
    if not parts:
        return "", "", ""
    return "/".join(parts[:-1]), parts[-1], "/".join(parts)


def canonical_path(path: str) -> str:
    return split_path(path)[2]


def is_root(path: str) -> bool:
    """Return True for "/" and other separator-only paths, but not for ""."""
    return bool(path) and not canonical_path(path)


def prefixes(directory: str) -> list[tuple[str, str]]:
    """
    Return (segment, prefix path) pairs for each segment of `directory`.

        prefixes("a/b") -> [("a", "a"), ("b", "a/b")]
    """
    segments = [s for s in directory.split("/") if s]
    return [(seg, "/".join(segments[: i + 1])) for i, seg in enumerate(segments)]


def join_path(directory: str, name: str) -> str:
    return canonical_path(f"{directory}/{name}")
