"""Helpers for ``/``-separated logical and physical resource paths."""

from __future__ import annotations

SEPARATOR = "/"


def join_path(*segments: str) -> str:
    """Join path segments with single separators, dropping empty segments.

    A leading separator on the first segment is preserved so absolute store
    paths stay absolute.
    """
    parts = [segment.strip(SEPARATOR) for segment in segments if segment.strip(SEPARATOR)]
    joined = SEPARATOR.join(parts)
    if segments and segments[0].startswith(SEPARATOR):
        return SEPARATOR + joined
    return joined


def child_name(parent: str, key: str) -> str:
    """Build the logical name of ``key`` nested below ``parent``."""
    return f"{parent}{SEPARATOR}{key}"


def split_path(path: str) -> list[str]:
    """Return the non-empty segments of ``path``."""
    return [segment for segment in path.split(SEPARATOR) if segment]


def parent_path(path: str) -> str | None:
    """Return the parent of an absolute path, or None for the root."""
    segments = split_path(path)
    if not segments:
        return None
    return SEPARATOR + SEPARATOR.join(segments[:-1])


def normalize_path(path: str) -> str:
    """Return ``path`` as an absolute path without duplicate separators."""
    return SEPARATOR + SEPARATOR.join(split_path(path))


def relative_to(path: str, root: str) -> str:
    """Return ``path`` relative to ``root``; ``path`` unchanged when outside it."""
    prefix = normalize_path(root).rstrip(SEPARATOR) + SEPARATOR
    normalized = normalize_path(path)
    if normalized.startswith(prefix):
        return normalized[len(prefix):]
    return normalized


__all__ = [
    "SEPARATOR",
    "child_name",
    "join_path",
    "normalize_path",
    "parent_path",
    "relative_to",
    "split_path",
]
