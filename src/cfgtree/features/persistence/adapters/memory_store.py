"""In-memory resource store adapter."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, final

from ..domain.errors import NodeAdaptationError, ResourceStoreError
from ..domain.resource_path import normalize_path, split_path
from ..usecases.ports import ResourceNode


@dataclass(slots=True)
class _Entry:
    """Mutable state behind one in-memory node."""

    resource_type: str
    properties: dict[str, Any] = field(default_factory=dict)
    children: dict[str, "_Entry"] = field(default_factory=dict)
    read_only: bool = False


@final
class InMemoryResourceStore:
    """Resource store keeping the whole tree in process memory.

    Changes are visible immediately; ``commit`` only counts calls so callers
    can assert commit granularity.
    """

    ROOT_TYPE = "root"

    _root: _Entry
    commit_count: int

    def __init__(self) -> None:
        self._root = _Entry(resource_type=self.ROOT_TYPE)
        self.commit_count = 0

    def create(
        self,
        path: str,
        properties: Mapping[str, Any] | None = None,
        *,
        resource_type: str = "unstructured",
        read_only: bool = False,
    ) -> ResourceNode:
        """Create or update a node with ``properties`` merged in, for fixtures and bootstrapping."""

        node = self.get_or_create(path, resource_type)
        entry = self._lookup(node.path)
        assert entry is not None
        entry.properties.update(properties or {})
        entry.read_only = read_only
        return node

    def resolve(self, path: str) -> ResourceNode | None:
        normalized = normalize_path(path)
        entry = self._lookup(normalized)
        if entry is None:
            return None
        return ResourceNode(path=normalized, resource_type=entry.resource_type)

    def get_or_create(self, path: str, type_hint: str) -> ResourceNode:
        entry = self._root
        for segment in split_path(path):
            child = entry.children.get(segment)
            if child is None:
                child = _Entry(resource_type=type_hint)
                entry.children[segment] = child
            entry = child
        return ResourceNode(path=normalize_path(path), resource_type=entry.resource_type)

    def properties(self, node: ResourceNode) -> dict[str, Any]:
        return copy.deepcopy(self._require(node).properties)

    def replace_properties(
        self,
        node: ResourceNode,
        values: Mapping[str, Any],
        reserved_prefix: str,
    ) -> None:
        entry = self._lookup(node.path)
        if entry is None or entry.read_only:
            raise NodeAdaptationError(f"Node {node.path} has no modifiable properties")
        for key in list(entry.properties):
            if key.startswith(reserved_prefix):
                continue
            del entry.properties[key]
        entry.properties.update(copy.deepcopy(dict(values)))

    def children(self, node: ResourceNode) -> list[ResourceNode]:
        entry = self._require(node)
        base = node.path.rstrip("/")
        return [
            ResourceNode(path=f"{base}/{name}", resource_type=child.resource_type)
            for name, child in entry.children.items()
        ]

    def delete(self, node: ResourceNode) -> None:
        segments = split_path(node.path)
        if not segments:
            raise ResourceStoreError("The root node cannot be deleted")
        parent = self._lookup("/" + "/".join(segments[:-1]))
        if parent is None or segments[-1] not in parent.children:
            raise ResourceStoreError(f"No resource found at {node.path}")
        del parent.children[segments[-1]]

    def commit(self) -> None:
        self.commit_count += 1

    def _lookup(self, path: str) -> _Entry | None:
        entry = self._root
        for segment in split_path(path):
            child = entry.children.get(segment)
            if child is None:
                return None
            entry = child
        return entry

    def _require(self, node: ResourceNode) -> _Entry:
        entry = self._lookup(node.path)
        if entry is None:
            raise ResourceStoreError(f"No resource found at {node.path}")
        return entry


__all__ = ["InMemoryResourceStore"]
