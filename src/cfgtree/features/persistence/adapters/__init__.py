"""Resource store adapters for the persistence feature."""

from .memory_store import InMemoryResourceStore
from .sqlite_store import SqliteResourceStore

__all__ = ["InMemoryResourceStore", "SqliteResourceStore"]
