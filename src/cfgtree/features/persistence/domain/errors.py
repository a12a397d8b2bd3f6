"""
Summary: Error hierarchy raised while persisting configuration trees.
Why: Give callers the failing path and the underlying store cause in one place.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base class for configuration persistence errors."""


class InvalidTargetError(ConfigurationError, ValueError):
    """Raised when the context path of a write does not resolve to a node."""

    def __init__(self, context_path: str) -> None:
        super().__init__(f"No resource found at {context_path}")
        self.context_path: str = context_path


class PersistenceFailure(ConfigurationError):
    """Raised when the store fails to create, replace, delete or commit."""

    def __init__(self, message: str, path: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.path: str = path
        self.cause: BaseException | None = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is None:
            return base
        return f"{base}: {self.cause}"


class PropertyAdaptationFailure(PersistenceFailure):
    """Raised when a node cannot be adapted into a mutable property view."""


class ResourceStoreError(Exception):
    """Raised by resource store adapters when a store operation fails."""


class NodeAdaptationError(ResourceStoreError):
    """Raised by adapters when a node does not offer writable properties."""


__all__ = [
    "ConfigurationError",
    "InvalidTargetError",
    "NodeAdaptationError",
    "PersistenceFailure",
    "PropertyAdaptationFailure",
    "ResourceStoreError",
]
