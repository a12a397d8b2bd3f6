"""Tests for resource path helpers."""

from cfgtree.features.persistence.domain.resource_path import (
    child_name,
    join_path,
    normalize_path,
    parent_path,
    relative_to,
    split_path,
)


def test_join_path_drops_empty_segments_and_keeps_absolute_prefix() -> None:
    assert join_path("/content/site", "configs", "cfg") == "/content/site/configs/cfg"
    assert join_path("/content/site/", "", "cfg/") == "/content/site/cfg"
    assert join_path("a", "b") == "a/b"


def test_child_name_appends_key() -> None:
    assert child_name("cfg", "sub") == "cfg/sub"
    assert child_name("cfg/item0", "nested") == "cfg/item0/nested"


def test_split_and_normalize() -> None:
    assert split_path("//a//b/") == ["a", "b"]
    assert normalize_path("a//b/") == "/a/b"
    assert normalize_path("") == "/"


def test_parent_path() -> None:
    assert parent_path("/a/b") == "/a"
    assert parent_path("/a") == "/"
    assert parent_path("/") is None


def test_relative_to() -> None:
    assert relative_to("/content/site/configs/cfg", "/content/site") == "configs/cfg"
    assert relative_to("/other/cfg", "/content/site") == "/other/cfg"
