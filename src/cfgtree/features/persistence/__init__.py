# Path: `src/cfgtree/features/persistence/__init__.py`
# Summary: Export persistence feature domain, use case and adapter symbols.
# Why: Provide a stable import surface for the application layer and tests.

from .domain.data_parts import ConfigurationDataParts, ValueKind, classify_value, decompose
from .domain.errors import (
    ConfigurationError,
    InvalidTargetError,
    NodeAdaptationError,
    PersistenceFailure,
    PropertyAdaptationFailure,
    ResourceStoreError,
)
from .domain.models import CollectionPersistData, PersistData, item_label
from .domain.naming import (
    ChildSegmentNamingStrategy,
    IdentityNamingStrategy,
    NameRemap,
    NamingStrategy,
)
from .usecases.config_writer import ConfigurationWriter
from .usecases.ports import ResourceNode, ResourceStore
from .usecases.resource_persistence import ResourcePersistence
from .adapters.memory_store import InMemoryResourceStore
from .adapters.sqlite_store import SqliteResourceStore

__all__ = [
    "ChildSegmentNamingStrategy",
    "CollectionPersistData",
    "ConfigurationDataParts",
    "ConfigurationError",
    "ConfigurationWriter",
    "IdentityNamingStrategy",
    "InMemoryResourceStore",
    "InvalidTargetError",
    "NameRemap",
    "NamingStrategy",
    "NodeAdaptationError",
    "PersistData",
    "PersistenceFailure",
    "PropertyAdaptationFailure",
    "ResourceNode",
    "ResourcePersistence",
    "ResourceStore",
    "ResourceStoreError",
    "SqliteResourceStore",
    "ValueKind",
    "classify_value",
    "decompose",
    "item_label",
]
