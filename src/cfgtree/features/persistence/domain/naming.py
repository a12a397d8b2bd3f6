"""
Summary: Naming strategies that map logical configuration names to physical store names.
Why: Let storage layouts add indirection per path kind without touching the writer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Protocol, final, override, runtime_checkable

from .resource_path import join_path

COLLECTION_PROPERTIES_NAME = "collectionProperties"


@final
@dataclass(frozen=True, slots=True)
class NameRemap:
    """Outcome of a naming operation.

    ``target`` is None when the strategy leaves the logical name untouched.
    """

    target: str | None = None

    def __post_init__(self) -> None:
        if self.target is not None and not self.target.strip("/"):
            raise ValueError("Remapped configuration name must not be empty")

    @classmethod
    def keep(cls) -> "NameRemap":
        """No remapping; the logical name is used unchanged."""
        return cls(None)

    @classmethod
    def to(cls, target: str) -> "NameRemap":
        """Remap to ``target`` (explicit identity when it equals the input)."""
        return cls(target)

    @property
    def is_remapped(self) -> bool:
        return self.target is not None

    def apply(self, logical_name: str) -> str:
        """Return the physical name for ``logical_name``."""
        return logical_name if self.target is None else self.target


@runtime_checkable
class NamingStrategy(Protocol):
    """Map logical configuration names to physical names per path kind."""

    def resource_name(self, name: str, related_path: str | None = None) -> NameRemap:
        """Physical name of a plain (non-collection) configuration."""
        ...

    def collection_parent_name(self, name: str, related_path: str | None = None) -> NameRemap:
        """Physical name of the container holding collection items."""
        ...

    def collection_item_name(self, name: str, related_path: str | None = None) -> NameRemap:
        """Physical name of one collection item, given its parent-joined path."""
        ...

    def collection_properties_name(self, parent_name: str) -> str:
        """Auxiliary physical name for container-scoped collection properties."""
        ...


class IdentityNamingStrategy:
    """Strategy that keeps every logical name unchanged."""

    def resource_name(self, name: str, related_path: str | None = None) -> NameRemap:
        return NameRemap.to(name)

    def collection_parent_name(self, name: str, related_path: str | None = None) -> NameRemap:
        return NameRemap.to(name)

    def collection_item_name(self, name: str, related_path: str | None = None) -> NameRemap:
        return NameRemap.to(name)

    def collection_properties_name(self, parent_name: str) -> str:
        return join_path(parent_name, COLLECTION_PROPERTIES_NAME)


@final
class ChildSegmentNamingStrategy(IdentityNamingStrategy):
    """Store configuration data in a fixed child node below each logical name.

    Plain configurations and collection items get ``/<segment>`` appended
    unless the whole path already contains that segment, so applying the
    strategy twice yields the same name. Collection parents are only
    redirected when ``redirect_collection_parent`` is set.
    """

    DEFAULT_SEGMENT: ClassVar[str] = "content"

    segment: str
    redirect_collection_parent: bool
    _pattern: re.Pattern[str]

    def __init__(self, segment: str = DEFAULT_SEGMENT, *, redirect_collection_parent: bool = False) -> None:
        cleaned = segment.strip("/")
        if not cleaned or "/" in cleaned:
            raise ValueError(f"Invalid child segment name: {segment!r}")
        self.segment = cleaned
        self.redirect_collection_parent = redirect_collection_parent
        self._pattern = re.compile(r"(.*/)?" + re.escape(cleaned) + r"(/.*)?")

    def contains_segment(self, path: str) -> bool:
        """Return True when any segment of ``path`` is the child segment."""
        return self._pattern.fullmatch(path) is not None

    def _redirect(self, name: str) -> NameRemap:
        if self.contains_segment(name):
            return NameRemap.to(name)
        return NameRemap.to(join_path(name, self.segment))

    @override
    def resource_name(self, name: str, related_path: str | None = None) -> NameRemap:
        return self._redirect(name)

    @override
    def collection_parent_name(self, name: str, related_path: str | None = None) -> NameRemap:
        if self.redirect_collection_parent:
            return self._redirect(name)
        return NameRemap.keep()

    @override
    def collection_item_name(self, name: str, related_path: str | None = None) -> NameRemap:
        return self._redirect(name)


__all__ = [
    "COLLECTION_PROPERTIES_NAME",
    "ChildSegmentNamingStrategy",
    "IdentityNamingStrategy",
    "NameRemap",
    "NamingStrategy",
]
