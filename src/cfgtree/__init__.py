"""cfgtree: write context-aware configuration into a hierarchical resource store."""

from cfgtree.application.services.context_config import ContextAwareConfig, build_naming_strategy
from cfgtree.features.persistence import (
    ChildSegmentNamingStrategy,
    ConfigurationError,
    ConfigurationWriter,
    IdentityNamingStrategy,
    InMemoryResourceStore,
    InvalidTargetError,
    NameRemap,
    NamingStrategy,
    PersistenceFailure,
    PropertyAdaptationFailure,
    SqliteResourceStore,
)
from cfgtree.features.schema import configuration

__version__ = "0.1.0"

__all__ = [
    "ChildSegmentNamingStrategy",
    "ConfigurationError",
    "ConfigurationWriter",
    "ContextAwareConfig",
    "IdentityNamingStrategy",
    "InMemoryResourceStore",
    "InvalidTargetError",
    "NameRemap",
    "NamingStrategy",
    "PersistenceFailure",
    "PropertyAdaptationFailure",
    "SqliteResourceStore",
    "build_naming_strategy",
    "configuration",
]
