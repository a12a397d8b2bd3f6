"""
Summary: Mark configuration classes and resolve their logical configuration names.
Why: Let callers address configuration by class while the store only sees names.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeVar

CONFIG_NAME_ATTRIBUTE: Final[str] = "__config_name__"
CONFIG_MARKER_ATTRIBUTE: Final[str] = "__configuration__"

T = TypeVar("T", bound=type)


def configuration(name: str | None = None) -> Callable[[T], T]:
    """Class decorator declaring a configuration schema.

    Args:
        name: Optional override of the logical configuration name.
    """

    def decorate(cls: T) -> T:
        setattr(cls, CONFIG_MARKER_ATTRIBUTE, True)
        setattr(cls, CONFIG_NAME_ATTRIBUTE, name)
        return cls

    return decorate


def is_configuration(candidate: object) -> bool:
    """Return True when ``candidate`` is a class marked with ``@configuration``."""
    # vars() keeps subclasses of a marked class from inheriting the marker
    return isinstance(candidate, type) and vars(candidate).get(CONFIG_MARKER_ATTRIBUTE) is True


def qualified_name(config_type: type) -> str:
    """Fully qualified ``module.QualName`` of ``config_type``."""
    return f"{config_type.__module__}.{config_type.__qualname__}"


def resolve_config_name(config: type | str) -> str:
    """Return the logical configuration name of ``config``.

    Strings are treated as names already. Classes use their declared override
    name when it is present and not blank, else their qualified name.
    """
    if isinstance(config, str):
        return config
    declared = vars(config).get(CONFIG_NAME_ATTRIBUTE)
    if isinstance(declared, str) and declared.strip():
        return declared
    return qualified_name(config)


__all__ = [
    "CONFIG_MARKER_ATTRIBUTE",
    "CONFIG_NAME_ATTRIBUTE",
    "configuration",
    "is_configuration",
    "qualified_name",
    "resolve_config_name",
]
