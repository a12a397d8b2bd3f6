"""SQLite-backed resource store adapter."""

from __future__ import annotations

import sqlite3
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cfgtree.platform.db.daos.resource_dao import ResourceDAO, ResourceRow
from cfgtree.platform.db.db_manager import DatabaseManager

from ..domain.errors import NodeAdaptationError, ResourceStoreError
from ..domain.resource_path import normalize_path, parent_path, split_path
from ..usecases.ports import ResourceNode, ResourceStore


@dataclass(slots=True)
class SqliteResourceStore(ResourceStore):
    """Bridge the persistence use cases to the SQLite resource tables.

    Changes stay in the open transaction until ``commit`` is called.
    """

    _db_manager: DatabaseManager
    _dao: ResourceDAO

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db_manager = db_manager
        if self._db_manager.conn is None:
            self._db_manager.connect()
        if self._db_manager.conn is None:  # pragma: no cover - defensive guard
            raise RuntimeError("Database connection could not be established")

        self._dao = ResourceDAO(self._db_manager.conn)

    def resolve(self, path: str) -> ResourceNode | None:
        try:
            row = self._dao.get_by_path(normalize_path(path))
        except sqlite3.Error as e:
            raise ResourceStoreError(f"Unable to resolve {path}: {e}") from e
        return self._to_node(row) if row else None

    def get_or_create(self, path: str, type_hint: str) -> ResourceNode:
        try:
            row = self._get_or_create_row(normalize_path(path), type_hint)
        except sqlite3.Error as e:
            raise ResourceStoreError(f"Unable to create {path}: {e}") from e
        return self._to_node(row)

    def properties(self, node: ResourceNode) -> dict[str, Any]:
        try:
            row = self._require(node)
            return self._dao.get_properties(row.id)
        except sqlite3.Error as e:
            raise ResourceStoreError(f"Unable to read properties of {node.path}: {e}") from e

    def replace_properties(
        self,
        node: ResourceNode,
        values: Mapping[str, Any],
        reserved_prefix: str,
    ) -> None:
        try:
            row = self._dao.get_by_path(node.path)
            if row is None:
                raise NodeAdaptationError(f"Node {node.path} has no modifiable properties")
            self._dao.replace_properties(row.id, values, reserved_prefix)
        except (TypeError, ValueError) as e:
            raise ResourceStoreError(f"Unable to encode properties of {node.path}: {e}") from e
        except sqlite3.Error as e:
            raise ResourceStoreError(f"Unable to write properties of {node.path}: {e}") from e

    def children(self, node: ResourceNode) -> list[ResourceNode]:
        try:
            row = self._require(node)
            return [self._to_node(child) for child in self._dao.list_children(row.id)]
        except sqlite3.Error as e:
            raise ResourceStoreError(f"Unable to list children of {node.path}: {e}") from e

    def delete(self, node: ResourceNode) -> None:
        if not split_path(node.path):
            raise ResourceStoreError("The root node cannot be deleted")
        try:
            row = self._require(node)
            self._dao.delete(row.id)
        except sqlite3.Error as e:
            raise ResourceStoreError(f"Unable to delete {node.path}: {e}") from e

    def commit(self) -> None:
        try:
            self._db_manager.commit_transaction()
        except sqlite3.Error as e:
            raise ResourceStoreError(str(e)) from e

    def _get_or_create_row(self, path: str, type_hint: str) -> ResourceRow:
        row = self._dao.get_by_path(path)
        if row is not None:
            return row
        parent = parent_path(path)
        if parent is None:  # pragma: no cover - the root row is created with the schema
            raise ResourceStoreError("Root resource is missing")
        parent_row = self._get_or_create_row(parent, type_hint)
        return self._dao.insert(parent_row.id, split_path(path)[-1], path, type_hint)

    def _require(self, node: ResourceNode) -> ResourceRow:
        row = self._dao.get_by_path(node.path)
        if row is None:
            raise ResourceStoreError(f"No resource found at {node.path}")
        return row

    @staticmethod
    def _to_node(row: ResourceRow) -> ResourceNode:
        return ResourceNode(path=row.path, resource_type=row.resource_type)


__all__ = ["SqliteResourceStore"]
