"""Tests for the resource DAO."""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from cfgtree.platform.db.daos.resource_dao import (
    ResourceDAO,
    ResourceRow,
    decode_property,
    encode_property,
)
from cfgtree.platform.db.db_manager import DatabaseManager


@pytest.fixture
def dao(db_manager: DatabaseManager) -> ResourceDAO:
    assert db_manager.conn is not None
    return ResourceDAO(db_manager.conn)


@pytest.fixture
def root(dao: ResourceDAO) -> ResourceRow:
    row = dao.get_by_path("/")
    assert row is not None
    return row


def test_insert_and_get_by_path(dao: ResourceDAO, root: ResourceRow) -> None:
    inserted = dao.insert(root.id, "a", "/a", "unstructured")

    assert dao.get_by_path("/a") == inserted
    assert inserted.parent_id == root.id
    assert dao.get_by_path("/missing") is None


def test_list_children_in_insertion_order(dao: ResourceDAO, root: ResourceRow) -> None:
    for name in ("z", "a", "m"):
        _ = dao.insert(root.id, name, f"/{name}", "unstructured")

    assert [row.name for row in dao.list_children(root.id)] == ["z", "a", "m"]


def test_replace_properties_honors_reserved_prefix(dao: ResourceDAO, root: ResourceRow) -> None:
    row = dao.insert(root.id, "a", "/a", "unstructured")
    dao.replace_properties(row.id, {"meta:type": "x", "old": 1}, "meta:")

    dao.replace_properties(row.id, {"new": {"k": [1, 2]}, "meta:type": "y"}, "meta:")

    assert dao.get_properties(row.id) == {"meta:type": "y", "new": {"k": [1, 2]}}


def test_replace_properties_encodes_before_writing(dao: ResourceDAO, root: ResourceRow) -> None:
    row = dao.insert(root.id, "a", "/a", "unstructured")
    dao.replace_properties(row.id, {"kept": 1}, "meta:")

    with pytest.raises(TypeError):
        dao.replace_properties(row.id, {"bad": object()}, "meta:")

    assert dao.get_properties(row.id) == {"kept": 1}


def test_delete_cascades_to_children_and_properties(
    dao: ResourceDAO, root: ResourceRow, db_manager: DatabaseManager
) -> None:
    parent = dao.insert(root.id, "a", "/a", "unstructured")
    child = dao.insert(parent.id, "b", "/a/b", "unstructured")
    dao.replace_properties(child.id, {"x": 1}, "meta:")

    dao.delete(parent.id)

    assert dao.get_by_path("/a/b") is None
    assert db_manager.conn is not None
    remaining = db_manager.conn.execute("SELECT COUNT(*) FROM resource_properties").fetchone()[0]
    assert remaining == 0


@pytest.mark.parametrize(
    "value",
    [
        date(2024, 2, 29),
        datetime(2024, 2, 29, 23, 59, 1, 500),
        time(7, 0, 30),
        ("a", ("b", 1)),
        frozenset({"x", "y"}),
        [1, "two", None, {"k": (3, 4)}],
    ],
    ids=["date", "datetime", "time", "nested-tuple", "frozenset", "mixed-list"],
)
def test_property_codec_preserves_types(value: object) -> None:
    decoded = decode_property(encode_property(value))

    assert decoded == value
    assert type(decoded) is type(value)


def test_replace_properties_stores_tagged_values(dao: ResourceDAO, root: ResourceRow) -> None:
    row = dao.insert(root.id, "a", "/a", "unstructured")

    dao.replace_properties(row.id, {"when": date(2024, 1, 1), "tags": ("a", "b")}, "meta:")

    assert dao.get_properties(row.id) == {"tags": ("a", "b"), "when": date(2024, 1, 1)}
