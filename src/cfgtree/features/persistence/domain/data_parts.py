"""
Summary: Split a configuration mapping into scalar, nested-record and nested-collection parts.
Why: Decide the shape of every value once so persistence never inspects raw values again.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ConfigRecord = Mapping[str, Any]


class ValueKind(str, Enum):
    """Classification of a single configuration value."""

    SCALAR = "scalar"
    NESTED_RECORD = "nested_record"
    NESTED_COLLECTION = "nested_collection"


def classify_value(value: object) -> ValueKind:
    """Classify ``value`` by its runtime shape.

    Mappings are nested records. Non-empty collections whose elements are all
    mappings are nested collections. Everything else, including strings and
    sequences of primitives, is a scalar stored as-is.
    """
    if isinstance(value, Mapping):
        return ValueKind.NESTED_RECORD
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.SCALAR
    if isinstance(value, Collection) and value:
        if all(isinstance(element, Mapping) for element in value):
            return ValueKind.NESTED_COLLECTION
    return ValueKind.SCALAR


@dataclass(frozen=True, slots=True)
class ConfigurationDataParts:
    """Disjoint partitions of one configuration mapping, each in key order."""

    values: dict[str, Any] = field(default_factory=dict)
    nested_records: dict[str, ConfigRecord] = field(default_factory=dict)
    nested_collections: dict[str, tuple[ConfigRecord, ...]] = field(default_factory=dict)

    def keys(self) -> set[str]:
        """Return the union of keys across all partitions."""
        return set(self.values) | set(self.nested_records) | set(self.nested_collections)


def decompose(values: ConfigRecord) -> ConfigurationDataParts:
    """Split ``values`` into its scalar, nested-record and nested-collection parts."""

    parts = ConfigurationDataParts()
    for key in sorted(values):
        value = values[key]
        kind = classify_value(value)
        if kind is ValueKind.NESTED_RECORD:
            parts.nested_records[key] = value
        elif kind is ValueKind.NESTED_COLLECTION:
            parts.nested_collections[key] = tuple(value)
        else:
            parts.values[key] = value
    return parts


__all__ = ["ConfigRecord", "ConfigurationDataParts", "ValueKind", "classify_value", "decompose"]
