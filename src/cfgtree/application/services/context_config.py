"""Application service for writing context-aware configuration.

This layer resolves configuration classes to logical names and builds a
``ConfigurationWriter`` per call so UIs and tests never wire the persistence
feature by hand.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, final

from cfgtree.config.config import NAMING_STRATEGY_CHILD_SEGMENT, NAMING_STRATEGY_IDENTITY
from cfgtree.config.settings import (
    CHILD_SEGMENT_NAME,
    CONFIG_REF_PROPERTY,
    DEFAULT_RESOURCE_TYPE,
    NAMING_STRATEGY,
    REDIRECT_COLLECTION_PARENT,
    RESERVED_PROPERTY_PREFIX,
)
from cfgtree.features.persistence import (
    ChildSegmentNamingStrategy,
    ConfigurationWriter,
    IdentityNamingStrategy,
    NamingStrategy,
    PersistenceFailure,
    ResourceNode,
    ResourceStore,
    ResourceStoreError,
)
from cfgtree.features.persistence.domain.resource_path import normalize_path
from cfgtree.features.schema import SchemaRegistry, SchemaResolver
from cfgtree.platform.logging import logger


def build_naming_strategy(
    name: str = NAMING_STRATEGY,
    *,
    segment: str = CHILD_SEGMENT_NAME,
    redirect_collection_parent: bool = REDIRECT_COLLECTION_PARENT,
) -> NamingStrategy:
    """Build the naming strategy selected by ``name``.

    Raises:
        ValueError: If ``name`` is not a known strategy.
    """
    normalized = name.strip().lower()
    if normalized == NAMING_STRATEGY_IDENTITY:
        return IdentityNamingStrategy()
    if normalized == NAMING_STRATEGY_CHILD_SEGMENT:
        return ChildSegmentNamingStrategy(
            segment, redirect_collection_parent=redirect_collection_parent
        )
    valid = ", ".join((NAMING_STRATEGY_IDENTITY, NAMING_STRATEGY_CHILD_SEGMENT))
    raise ValueError(f"Unsupported naming strategy '{name}'. Valid options: {valid}")


@final
class ContextAwareConfig:
    """Write, read and delete configuration of store contexts."""

    _store: ResourceStore
    _naming: NamingStrategy
    _schemas: SchemaResolver
    _writer_factory: Callable[..., ConfigurationWriter]

    def __init__(
        self,
        store: ResourceStore,
        *,
        naming: NamingStrategy | None = None,
        registry: SchemaResolver | None = None,
        writer_factory: Callable[..., ConfigurationWriter] | None = None,
    ) -> None:
        """Create a service bound to ``store``.

        Args:
            store: Resource store receiving configuration.
            naming: Naming strategy; defaults to the configured one.
            registry: Schema resolver; defaults to an empty ``SchemaRegistry``.
            writer_factory: Override for building writers, mainly for tests.
        """
        self._store = store
        self._naming = naming or build_naming_strategy()
        self._schemas = registry or SchemaRegistry()
        self._writer_factory = writer_factory or ConfigurationWriter

    @property
    def registry(self) -> SchemaResolver:
        return self._schemas

    def register_configuration_classes(self, *classes: type) -> None:
        """Register ``@configuration`` classes."""
        self._schemas.register_schemas(classes)

    def register_configuration_modules(self, *module_names: str) -> None:
        """Register every ``@configuration`` class found in the given modules or packages."""
        self._schemas.register_schemas(module_names)

    def ensure_context(self, context_path: str, *, config_ref: str | None = None) -> ResourceNode:
        """Create the context node at ``context_path`` if needed and commit it.

        Args:
            context_path: Store path of the context.
            config_ref: Optional path of a separate configuration root, stored
                in the reserved reference property of the context.

        Raises:
            PersistenceFailure: If the store rejects the change.
        """
        path = normalize_path(context_path)
        try:
            node = self._store.get_or_create(path, DEFAULT_RESOURCE_TYPE)
            if config_ref is not None:
                current = self._store.properties(node)
                current[CONFIG_REF_PROPERTY] = normalize_path(config_ref)
                self._store.replace_properties(node, current, RESERVED_PROPERTY_PREFIX)
            self._store.commit()
        except ResourceStoreError as e:
            raise PersistenceFailure(f"Unable to create context {path}", path, e) from e
        logger.info("Context ready at %s", path, extra={"store_path": path})
        return node

    def writer(self, context_path: str) -> ConfigurationWriter:
        """Build a writer for ``context_path``; raises ``InvalidTargetError`` when it is missing."""
        return self._writer_factory(self._store, context_path, naming=self._naming)

    def write_configuration(
        self,
        context_path: str,
        config: type | str,
        values: Mapping[str, Any] | None = None,
        /,
        **kwargs: Any,
    ) -> None:
        """Write configuration ``config`` for ``context_path``.

        Keyword arguments are merged over ``values``.
        """
        merged: dict[str, Any] = dict(values or {})
        merged.update(kwargs)
        self.writer(context_path).write_configuration(self._schemas.resolve_config_name(config), merged)

    def write_configuration_collection(
        self,
        context_path: str,
        config: type | str,
        items: Iterable[Mapping[str, Any]],
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        """Replace configuration collection ``config`` for ``context_path`` with ``items``."""
        self.writer(context_path).write_configuration_collection(
            self._schemas.resolve_config_name(config), items, properties
        )

    def read_configuration(self, context_path: str, config: type | str) -> dict[str, Any]:
        """Return the stored scalar properties of ``config``."""
        return self.writer(context_path).read_configuration(self._schemas.resolve_config_name(config))

    def read_configuration_collection(
        self, context_path: str, config: type | str
    ) -> list[dict[str, Any]]:
        """Return the stored scalar properties of each item of ``config``."""
        return self.writer(context_path).read_configuration_collection(
            self._schemas.resolve_config_name(config)
        )

    def delete_configuration(self, context_path: str, config: type | str) -> bool:
        """Delete ``config`` for ``context_path``; return False when nothing was stored."""
        return self.writer(context_path).delete_configuration(self._schemas.resolve_config_name(config))


__all__ = ["ContextAwareConfig", "build_naming_strategy"]
