"""Ports for the schema feature."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class SchemaResolver(Protocol):
    """Discover configuration schemas and resolve their logical names."""

    def register_schemas(self, identifiers: Iterable[type | str]) -> None:
        """Register configuration classes, or every configuration class of the named modules."""
        ...

    def resolve_config_name(self, config: type | str) -> str:
        """Return the logical configuration name of ``config``."""
        ...


__all__ = ["SchemaResolver"]
