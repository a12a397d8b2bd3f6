"""
Summary: Write configuration nodes and collections into a resource store.
Why: Keep get-or-create, destructive replace and error wrapping out of the recursive writer.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from logging import Logger, getLogger
from typing import Any, final

from ..domain.errors import (
    NodeAdaptationError,
    PersistenceFailure,
    PropertyAdaptationFailure,
    ResourceStoreError,
)
from ..domain.models import CollectionPersistData, PersistData
from .ports import ResourceNode, ResourceStore


@final
class ResourcePersistence:
    """Persist property maps at absolute store paths through a ``ResourceStore``."""

    _store: ResourceStore
    _reserved_prefix: str
    _resource_type: str
    _logger: Logger

    def __init__(
        self,
        store: ResourceStore,
        *,
        reserved_prefix: str,
        resource_type: str,
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._reserved_prefix = reserved_prefix
        self._resource_type = resource_type
        self._logger = logger or getLogger(__name__)

    def persist_configuration(self, path: str, data: PersistData) -> ResourceNode:
        """Replace the properties of the node at ``path``, creating it if needed."""

        return self._get_or_create(path, data.properties)

    def persist_configuration_collection(
        self,
        parent_path: str,
        data: CollectionPersistData,
        *,
        item_path: Callable[[str], str],
        properties_path: str,
    ) -> list[ResourceNode]:
        """Replace every item below ``parent_path`` with the items of ``data``.

        Existing children of the parent are deleted first. ``item_path`` maps
        an item label to the absolute path of that item and
        ``properties_path`` is the node receiving container-scoped properties.
        """

        parent = self._get_or_create(parent_path, {})
        self._delete_children(parent)

        written: list[ResourceNode] = []
        for label, item in data.labeled_items():
            written.append(self._get_or_create(item_path(label), item.properties))

        if data.properties is not None:
            _ = self._get_or_create(properties_path, data.properties)

        return written

    def delete_configuration(self, path: str) -> bool:
        """Delete the node at ``path`` and its subtree; return False when absent."""

        try:
            node = self._store.resolve(path)
            if node is None:
                return False
            self._store.delete(node)
        except ResourceStoreError as e:
            self._logger.error("Unable to delete configuration: %s", e, extra={"store_path": path})
            raise PersistenceFailure(f"Unable to delete configuration at {path}", path, e) from e
        self._logger.debug("Deleted configuration", extra={"store_path": path})
        return True

    def read_properties(self, path: str) -> dict[str, Any]:
        """Return the non-reserved properties at ``path``; empty when absent."""

        try:
            node = self._store.resolve(path)
            if node is None:
                return {}
            values = self._store.properties(node)
        except ResourceStoreError as e:
            raise PersistenceFailure(f"Unable to read configuration at {path}", path, e) from e
        return {
            key: value
            for key, value in values.items()
            if not key.startswith(self._reserved_prefix)
        }

    def list_children(self, path: str) -> list[ResourceNode]:
        """Return the children of the node at ``path``; empty when absent."""

        try:
            node = self._store.resolve(path)
            if node is None:
                return []
            return list(self._store.children(node))
        except ResourceStoreError as e:
            raise PersistenceFailure(f"Unable to list children of {path}", path, e) from e

    def commit(self, path: str) -> None:
        """Commit pending store changes made while writing ``path``."""

        try:
            self._store.commit()
        except ResourceStoreError as e:
            self._logger.error("Unable to save configuration: %s", e, extra={"store_path": path})
            raise PersistenceFailure("Unable to save configuration", path, e) from e

    def _get_or_create(self, path: str, properties: Mapping[str, Any]) -> ResourceNode:
        try:
            node = self._store.get_or_create(path, self._resource_type)
            self._store.replace_properties(node, properties, self._reserved_prefix)
        except NodeAdaptationError as e:
            self._logger.error("Unable to adapt node properties: %s", e, extra={"store_path": path})
            raise PropertyAdaptationFailure(
                f"Unable to adapt properties of {path}", path, e
            ) from e
        except ResourceStoreError as e:
            self._logger.error("Unable to persist configuration: %s", e, extra={"store_path": path})
            raise PersistenceFailure(f"Unable to persist configuration to {path}", path, e) from e
        self._logger.debug("Persisted %d properties", len(properties), extra={"store_path": path})
        return node

    def _delete_children(self, node: ResourceNode) -> None:
        try:
            for child in list(self._store.children(node)):
                self._store.delete(child)
        except ResourceStoreError as e:
            self._logger.error("Unable to remove children: %s", e, extra={"store_path": node.path})
            raise PersistenceFailure(f"Unable to remove children from {node.path}", node.path, e) from e


__all__ = ["ResourcePersistence"]
