"""Registry of configuration schema classes."""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Iterable
from logging import Logger, getLogger
from types import ModuleType
from typing import final

from ..domain.annotations import is_configuration, resolve_config_name


@final
class SchemaRegistry:
    """Keep track of configuration classes by logical name."""

    _schemas: dict[str, type]
    _logger: Logger

    def __init__(self, logger: Logger | None = None) -> None:
        self._schemas = {}
        self._logger = logger or getLogger(__name__)

    def register_schemas(self, identifiers: Iterable[type | str]) -> None:
        """Register classes directly and scan modules or packages given by name."""

        for identifier in identifiers:
            if isinstance(identifier, str):
                self.register_modules(identifier)
            else:
                self.register_classes(identifier)

    def register_classes(self, *classes: type) -> None:
        """Register configuration classes.

        Raises:
            ValueError: If a class is not marked with ``@configuration`` or
                its name is already taken by another class.
        """
        for config_type in classes:
            if not is_configuration(config_type):
                raise ValueError(f"{config_type!r} is not marked with @configuration")
            self._add(config_type)

    def register_modules(self, *module_names: str) -> None:
        """Import modules (and package submodules) and register every configuration class."""

        for module_name in module_names:
            for module in self._iter_modules(importlib.import_module(module_name)):
                for _, member in inspect.getmembers(module, is_configuration):
                    if member.__module__ == module.__name__:
                        self._add(member)

    def resolve_config_name(self, config: type | str) -> str:
        return resolve_config_name(config)

    def get(self, name: str) -> type | None:
        """Return the class registered under ``name``."""
        return self._schemas.get(name)

    @property
    def names(self) -> list[str]:
        """Registered configuration names, sorted."""
        return sorted(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def _add(self, config_type: type) -> None:
        name = resolve_config_name(config_type)
        existing = self._schemas.get(name)
        if existing is not None and existing is not config_type:
            raise ValueError(
                f"Configuration name {name!r} already registered by {existing.__qualname__}"
            )
        self._schemas[name] = config_type
        self._logger.debug("Registered configuration %s", name)

    @staticmethod
    def _iter_modules(module: ModuleType) -> Iterable[ModuleType]:
        yield module
        search_path = getattr(module, "__path__", None)
        if search_path is None:
            return
        for info in pkgutil.walk_packages(search_path, prefix=f"{module.__name__}."):
            yield importlib.import_module(info.name)


__all__ = ["SchemaRegistry"]
