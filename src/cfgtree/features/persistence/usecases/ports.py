"""Ports for the persistence feature.

Where: features/persistence/usecases.
What: Protocols and records describing the hierarchical resource store the writer drives.
Why: Allow in-memory and SQLite stores to satisfy persistence without coupling use cases to either.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class ResourceNode:
    """Handle to one node of a resource store."""

    path: str
    resource_type: str

    @property
    def name(self) -> str:
        """Last segment of the node path; empty for the root."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]


@runtime_checkable
class ResourceStore(Protocol):
    """Hierarchical, path-addressed node store.

    Adapters raise ``ResourceStoreError`` (or ``NodeAdaptationError`` for
    nodes without writable properties) when an operation fails.
    """

    def resolve(self, path: str) -> ResourceNode | None:
        """Return the node at ``path`` or None when it does not exist."""
        ...

    def get_or_create(self, path: str, type_hint: str) -> ResourceNode:
        """Return the node at ``path``, creating it and missing ancestors."""
        ...

    def properties(self, node: ResourceNode) -> dict[str, Any]:
        """Return a copy of every property stored on ``node``."""
        ...

    def replace_properties(
        self,
        node: ResourceNode,
        values: Mapping[str, Any],
        reserved_prefix: str,
    ) -> None:
        """Drop non-reserved properties of ``node``, then set ``values``."""
        ...

    def children(self, node: ResourceNode) -> Sequence[ResourceNode]:
        """Return the direct children of ``node`` in creation order."""
        ...

    def delete(self, node: ResourceNode) -> None:
        """Delete ``node`` and its subtree."""
        ...

    def commit(self) -> None:
        """Write pending changes back to the underlying storage."""
        ...


__all__ = ["ResourceNode", "ResourceStore"]
