"""Shared pytest fixtures for resource store backed tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from cfgtree.features.persistence import (
    InMemoryResourceStore,
    ResourceStore,
    SqliteResourceStore,
)
from cfgtree.platform.db.db_manager import DatabaseManager

CONTEXT_PATH = "/content/site"


@pytest.fixture
def context_path() -> str:
    """Store path of the context every store fixture provides."""

    return CONTEXT_PATH


@pytest.fixture
def config_root(context_path: str) -> str:
    """Configuration root derived from the context with the default bucket."""

    return f"{context_path}/configs"


@pytest.fixture
def memory_store() -> InMemoryResourceStore:
    """In-memory store holding an empty context node."""

    store = InMemoryResourceStore()
    _ = store.create(CONTEXT_PATH)
    return store


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """Create a database manager with in-memory database.

    Yields:
        DatabaseManager: Database manager instance.
    """
    manager = DatabaseManager(":memory:")
    manager.connect()
    yield manager
    manager.close()


@pytest.fixture
def sqlite_store(db_manager: DatabaseManager) -> SqliteResourceStore:
    """SQLite store holding an empty, committed context node."""

    store = SqliteResourceStore(db_manager)
    _ = store.get_or_create(CONTEXT_PATH, "unstructured")
    store.commit()
    return store


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest) -> ResourceStore:
    """Run a test against every store adapter."""

    return request.getfixturevalue(f"{request.param}_store")
