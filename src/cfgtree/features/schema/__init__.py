"""Public surface for the schema feature."""

from .domain.annotations import configuration, is_configuration, qualified_name, resolve_config_name
from .usecases.ports import SchemaResolver
from .usecases.registry import SchemaRegistry

__all__ = [
    "SchemaRegistry",
    "SchemaResolver",
    "configuration",
    "is_configuration",
    "qualified_name",
    "resolve_config_name",
]
