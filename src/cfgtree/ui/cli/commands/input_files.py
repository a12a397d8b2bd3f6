"""src/cfgtree/ui/cli/commands/input_files.py
What: Load configuration documents given on the command line.
Why: Accept TOML and JSON input while handing the writer plain mappings and lists.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any


def load_document(path: Path) -> Any:
    """Parse ``path`` as TOML when it has a ``.toml`` suffix, as JSON otherwise.

    Raises:
        ValueError: If the file content cannot be decoded.
    """
    if path.suffix.lower() == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_mapping(path: Path) -> dict[str, Any]:
    """Load a configuration mapping.

    Raises:
        ValueError: If the document is not a mapping.
    """
    document = load_document(path)
    if not isinstance(document, Mapping):
        raise ValueError(f"{path} must contain a mapping, got {type(document).__name__}")
    return dict(document)


def load_collection(path: Path) -> tuple[list[dict[str, Any]], dict[str, Any] | None]:
    """Load collection items and optional container properties.

    A JSON document may be a plain list of mappings. Mapping documents (and
    every TOML document) carry the items under ``items`` and may carry
    container properties under ``properties``.

    Raises:
        ValueError: If items are missing or are not mappings.
    """
    document = load_document(path)
    properties: dict[str, Any] | None = None
    if isinstance(document, Mapping):
        raw_properties = document.get("properties")
        if raw_properties is not None and not isinstance(raw_properties, Mapping):
            raise ValueError(f"{path}: 'properties' must be a table")
        properties = dict(raw_properties) if raw_properties is not None else None
        document = document.get("items")
        if document is None:
            raise ValueError(f"{path} has no 'items' entry")
    if not isinstance(document, list):
        raise ValueError(f"{path} must contain a list of items")

    items: list[dict[str, Any]] = []
    for index, item in enumerate(document):
        if not isinstance(item, Mapping):
            raise ValueError(f"{path}: item {index} is not a mapping")
        items.append(dict(item))
    return items, properties


__all__ = ["load_collection", "load_document", "load_mapping"]
