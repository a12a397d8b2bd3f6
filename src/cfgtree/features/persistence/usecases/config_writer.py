"""
Summary: Recursively write configuration trees and collections below a context path.
Why: Drive decomposition and per-level naming so nested data lands at predictable store paths.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from logging import Logger, getLogger
from typing import Any, Final, final

from cfgtree.config.settings import (
    CONFIG_BUCKET_NAME,
    CONFIG_REF_PROPERTY,
    DEFAULT_RESOURCE_TYPE,
    RESERVED_PROPERTY_PREFIX,
)

from ..domain.data_parts import ConfigRecord, ConfigurationDataParts, decompose
from ..domain.errors import InvalidTargetError, PersistenceFailure, ResourceStoreError
from ..domain.models import ITEM_LABEL_PREFIX, CollectionPersistData, PersistData, item_label
from ..domain.naming import IdentityNamingStrategy, NamingStrategy
from ..domain.resource_path import child_name, join_path, normalize_path, split_path
from .ports import ResourceStore
from .resource_persistence import ResourcePersistence

_ITEM_LABEL_PATTERN: Final[re.Pattern[str]] = re.compile(re.escape(ITEM_LABEL_PREFIX) + r"(\d+)")


@final
class ConfigurationWriter:
    """Write configuration for one context through a naming strategy.

    Each public write is committed once when the whole tree below it has been
    written. A failure aborts the call without committing; sub-trees written by
    earlier calls stay in place.
    """

    context_path: str
    config_root: str
    _store: ResourceStore
    _naming: NamingStrategy
    _persistence: ResourcePersistence
    _logger: Logger

    def __init__(
        self,
        store: ResourceStore,
        context_path: str,
        *,
        naming: NamingStrategy | None = None,
        reserved_prefix: str = RESERVED_PROPERTY_PREFIX,
        config_bucket: str = CONFIG_BUCKET_NAME,
        config_ref_property: str = CONFIG_REF_PROPERTY,
        resource_type: str = DEFAULT_RESOURCE_TYPE,
        logger: Logger | None = None,
    ) -> None:
        """Bind the writer to ``context_path``.

        Args:
            store: Resource store receiving the configuration nodes.
            context_path: Existing node the configuration belongs to.
            naming: Strategy mapping logical names to physical names.
            reserved_prefix: Prefix of properties preserved across writes.
            config_bucket: Node below the configuration root holding configurations.
            config_ref_property: Context property pointing at a separate configuration root.
            resource_type: Type hint for created nodes.
            logger: Logger override.

        Raises:
            InvalidTargetError: If ``context_path`` does not resolve to a node.
        """
        self._store = store
        self._naming = naming or IdentityNamingStrategy()
        self._logger = logger or getLogger(__name__)
        self._persistence = ResourcePersistence(
            store,
            reserved_prefix=reserved_prefix,
            resource_type=resource_type,
            logger=self._logger,
        )

        self.context_path = normalize_path(context_path)
        try:
            context = store.resolve(self.context_path)
            context_properties = store.properties(context) if context is not None else {}
        except ResourceStoreError as e:
            raise PersistenceFailure(
                f"Unable to resolve context {self.context_path}", self.context_path, e
            ) from e
        if context is None:
            raise InvalidTargetError(self.context_path)

        config_ref = context_properties.get(config_ref_property)
        root = config_ref if isinstance(config_ref, str) and config_ref.strip("/ ") else context.path
        self.config_root = join_path(normalize_path(root), config_bucket)

    # Writes -----------------------------------------------------------------

    def write_configuration(self, name: str, values: ConfigRecord) -> None:
        """Write ``values`` and everything nested in it as configuration ``name``."""

        logical_name = self._check_name(name)
        self._write_configuration(logical_name, values)
        path = self.resource_path(logical_name)
        self._persistence.commit(path)
        self._logger.info("Wrote configuration %s", logical_name, extra=self._log_extra(path))

    def write_configuration_collection(
        self,
        name: str,
        items: Iterable[ConfigRecord],
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        """Replace configuration collection ``name`` with ``items``.

        Args:
            name: Logical collection name.
            items: Item mappings; their order defines the item labels.
            properties: Optional container-scoped properties of the collection.
        """
        logical_name = self._check_name(name)
        self._write_configuration_collection(logical_name, list(items), properties)
        path = self.collection_parent_path(logical_name)
        self._persistence.commit(path)
        self._logger.info("Wrote configuration collection %s", logical_name, extra=self._log_extra(path))

    def delete_configuration(self, name: str) -> bool:
        """Delete configuration ``name`` and its subtree; return False when absent.

        Nested configuration lives below the un-remapped logical path, so that
        node goes too when the strategy stores ``name`` somewhere else.
        """

        logical_name = self._check_name(name)
        path = self.resource_path(logical_name)
        deleted = self._persistence.delete_configuration(path)
        logical_path = self._absolute(logical_name)
        if logical_path != path:
            deleted = self._persistence.delete_configuration(logical_path) or deleted
        self._persistence.commit(path)
        return deleted

    # Reads ------------------------------------------------------------------

    def read_configuration(self, name: str) -> dict[str, Any]:
        """Return the scalar properties stored for configuration ``name``."""

        return self._persistence.read_properties(self.resource_path(self._check_name(name)))

    def read_configuration_collection(self, name: str) -> list[dict[str, Any]]:
        """Return the scalar properties of each item of collection ``name`` in item order."""

        logical_name = self._check_name(name)
        parent_name = self._collection_parent_name(logical_name)
        labels: list[tuple[int, str]] = []
        for child in self._persistence.list_children(self._absolute(parent_name)):
            match = _ITEM_LABEL_PATTERN.fullmatch(child.name)
            if match is not None:
                labels.append((int(match.group(1)), child.name))
        return [
            self._persistence.read_properties(self._absolute(self._item_name(parent_name, label)))
            for _, label in sorted(labels)
        ]

    # Paths ------------------------------------------------------------------

    def resource_path(self, name: str) -> str:
        """Absolute store path of plain configuration ``name``."""
        return self._absolute(self._naming.resource_name(name).apply(name))

    def collection_parent_path(self, name: str) -> str:
        """Absolute store path of the parent node of collection ``name``."""
        return self._absolute(self._collection_parent_name(name))

    def collection_item_path(self, name: str, index: int) -> str:
        """Absolute store path of item ``index`` of collection ``name``."""
        return self._absolute(self._item_name(self._collection_parent_name(name), item_label(index)))

    # Recursion --------------------------------------------------------------

    def _write_configuration(self, name: str, values: ConfigRecord) -> None:
        parts = decompose(values)
        _ = self._persistence.persist_configuration(
            self.resource_path(name), PersistData(parts.values)
        )
        self._write_nested(name, parts)

    def _write_configuration_collection(
        self,
        name: str,
        items: list[ConfigRecord],
        properties: Mapping[str, Any] | None,
    ) -> None:
        labeled: dict[str, ConfigurationDataParts] = {}
        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise TypeError(
                    f"Collection {name} item {index} must be a mapping, got {type(item).__name__}"
                )
            labeled[item_label(index)] = decompose(item)

        parent_name = self._collection_parent_name(name)
        data = CollectionPersistData(
            items=tuple(
                PersistData(parts.values, collection_item_name=label)
                for label, parts in labeled.items()
            ),
            properties=properties,
        )
        _ = self._persistence.persist_configuration_collection(
            self._absolute(parent_name),
            data,
            item_path=lambda label: self._absolute(self._item_name(parent_name, label)),
            properties_path=self._absolute(self._naming.collection_properties_name(parent_name)),
        )

        for label, parts in labeled.items():
            self._write_nested(child_name(name, label), parts)

    def _write_nested(self, name: str, parts: ConfigurationDataParts) -> None:
        # Children extend the logical name; each level is remapped on its own.
        for key, record in parts.nested_records.items():
            self._write_configuration(child_name(name, key), record)
        for key, collection in parts.nested_collections.items():
            self._write_configuration_collection(child_name(name, key), list(collection), None)

    # Helpers ----------------------------------------------------------------

    def _collection_parent_name(self, name: str) -> str:
        return self._naming.collection_parent_name(name).apply(name)

    def _item_name(self, parent_name: str, label: str) -> str:
        joined = child_name(parent_name, label)
        return self._naming.collection_item_name(joined).apply(joined)

    def _absolute(self, physical_name: str) -> str:
        return join_path(self.config_root, physical_name)

    def _log_extra(self, path: str) -> dict[str, str]:
        return {"store_path": path, "store_root": self.config_root}

    @staticmethod
    def _check_name(name: str) -> str:
        logical_name = "/".join(split_path(name))
        if not logical_name:
            raise ValueError("Configuration name must not be empty")
        return logical_name


__all__ = ["ConfigurationWriter"]
