"""Data access object for the resources and resource_properties tables."""

import json
import sqlite3
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Final, final

# Marks JSON objects standing for values JSON has no native form for.
_TYPE_KEY: Final[str] = "__cfgtree_type__"
_VALUE_KEY: Final[str] = "value"


def _tag(value: Any) -> Any:
    if isinstance(value, tuple):
        return {_TYPE_KEY: "tuple", _VALUE_KEY: [_tag(item) for item in value]}
    if isinstance(value, frozenset | set):
        kind = "frozenset" if isinstance(value, frozenset) else "set"
        return {_TYPE_KEY: kind, _VALUE_KEY: [_tag(item) for item in value]}
    if isinstance(value, list):
        return [_tag(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _tag(item) for key, item in value.items()}
    # datetime subclasses date; test it first.
    if isinstance(value, datetime):
        return {_TYPE_KEY: "datetime", _VALUE_KEY: value.isoformat()}
    if isinstance(value, date):
        return {_TYPE_KEY: "date", _VALUE_KEY: value.isoformat()}
    if isinstance(value, time):
        return {_TYPE_KEY: "time", _VALUE_KEY: value.isoformat()}
    return value


def _untag(obj: dict[str, Any]) -> Any:
    kind = obj.get(_TYPE_KEY)
    if kind is None or set(obj) != {_TYPE_KEY, _VALUE_KEY}:
        return obj
    value = obj[_VALUE_KEY]
    match kind:
        case "tuple":
            return tuple(value)
        case "set":
            return set(value)
        case "frozenset":
            return frozenset(value)
        case "datetime":
            return datetime.fromisoformat(value)
        case "date":
            return date.fromisoformat(value)
        case "time":
            return time.fromisoformat(value)
        case _:
            return obj


def encode_property(value: Any) -> str:
    """Encode a property value as JSON, tagging tuples, sets and temporal values.

    Raises:
        TypeError: If the value holds anything else JSON cannot represent.
    """
    return json.dumps(_tag(value))


def decode_property(encoded: str) -> Any:
    """Decode a value written by ``encode_property`` back to its original type."""
    return json.loads(encoded, object_hook=_untag)


@dataclass(slots=True, frozen=True)
class ResourceRow:
    """One row of the resources table."""

    id: int
    parent_id: int | None
    name: str
    path: str
    resource_type: str


@final
class ResourceDAO:
    """Data access object for resource nodes and their properties.

    SQLite errors propagate to the caller; nothing is committed here.
    """

    conn: sqlite3.Connection

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize DAO.

        Args:
            conn: Database connection.
        """
        self.conn = conn

    def get_by_path(self, path: str) -> ResourceRow | None:
        """Get the resource stored at ``path``.

        Args:
            path: Absolute, normalized resource path.

        Returns:
            ResourceRow | None: Row if found.
        """
        cursor = self.conn.cursor()
        _ = cursor.execute(
            """
            SELECT id, parent_id, name, path, resource_type
            FROM resources
            WHERE path = ?
            """,
            (path,),
        )
        row = cursor.fetchone()
        return ResourceRow(*row) if row else None

    def insert(self, parent_id: int, name: str, path: str, resource_type: str) -> ResourceRow:
        """Insert a child resource.

        Args:
            parent_id: Identifier of the parent resource.
            name: Last path segment.
            path: Absolute resource path.
            resource_type: Type recorded for the node.

        Returns:
            ResourceRow: The inserted row.
        """
        cursor = self.conn.cursor()
        _ = cursor.execute(
            """
            INSERT INTO resources (parent_id, name, path, resource_type)
            VALUES (?, ?, ?, ?)
            """,
            (parent_id, name, path, resource_type),
        )
        row_id = cursor.lastrowid
        assert row_id is not None
        return ResourceRow(row_id, parent_id, name, path, resource_type)

    def list_children(self, resource_id: int) -> list[ResourceRow]:
        """List direct children in creation order."""
        cursor = self.conn.cursor()
        _ = cursor.execute(
            """
            SELECT id, parent_id, name, path, resource_type
            FROM resources
            WHERE parent_id = ?
            ORDER BY id
            """,
            (resource_id,),
        )
        return [ResourceRow(*row) for row in cursor.fetchall()]

    def delete(self, resource_id: int) -> None:
        """Delete a resource; children and properties cascade."""
        _ = self.conn.execute("DELETE FROM resources WHERE id = ?", (resource_id,))

    def get_properties(self, resource_id: int) -> dict[str, Any]:
        """Return decoded properties of a resource."""
        cursor = self.conn.cursor()
        _ = cursor.execute(
            """
            SELECT name, value
            FROM resource_properties
            WHERE resource_id = ?
            ORDER BY name
            """,
            (resource_id,),
        )
        return {name: decode_property(value) for name, value in cursor.fetchall()}

    def replace_properties(
        self,
        resource_id: int,
        values: Mapping[str, Any],
        reserved_prefix: str,
    ) -> None:
        """Remove non-reserved properties, then insert ``values``.

        Raises:
            TypeError: If a value cannot be encoded by ``encode_property``.
            sqlite3.Error: On database failures.
        """
        encoded = [(resource_id, name, encode_property(value)) for name, value in values.items()]
        _ = self.conn.execute(
            """
            DELETE FROM resource_properties
            WHERE resource_id = ? AND substr(name, 1, ?) != ?
            """,
            (resource_id, len(reserved_prefix), reserved_prefix),
        )
        _ = self.conn.executemany(
            """
            INSERT INTO resource_properties (resource_id, name, value)
            VALUES (?, ?, ?)
            ON CONFLICT(resource_id, name) DO UPDATE SET value = excluded.value
            """,
            encoded,
        )
        _ = self.conn.execute(
            "UPDATE resources SET updated_at = CURRENT_TIMESTAMP WHERE id = ?",
            (resource_id,),
        )


__all__ = ["ResourceDAO", "ResourceRow", "decode_property", "encode_property"]
