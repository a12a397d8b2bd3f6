"""Shared path utilities for configuration, store and log locations.

Every location has a repository-local default and an environment override:

==========  ====================================  ======================
Location    Default                               Override
==========  ====================================  ======================
Settings    ``<repo_root>/config/config.toml``    ``CFGTREE_CONFIG_FILE``
Data        ``<repo_root>/.data``                 ``CFGTREE_DATA_DIR``
Logs        ``<repo_root>/logs``                  ``CFGTREE_LOG_DIR``
==========  ====================================  ======================

The SQLite store is ``cfgtree.db`` inside the data directory and the log
file is ``cfgtree.log`` inside the log directory.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG_FILE: Final[str] = "CFGTREE_CONFIG_FILE"
ENV_DATA_DIR: Final[str] = "CFGTREE_DATA_DIR"
ENV_LOG_DIR: Final[str] = "CFGTREE_LOG_DIR"

DB_FILE_NAME: Final[str] = "cfgtree.db"
LOG_FILE_NAME: Final[str] = "cfgtree.log"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path: explicit value, then non-blank environment value, then default."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (this file by default) to the first directory holding a root marker.

    Falls back to the current working directory when no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Location of the settings file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Directory holding the SQLite resource store."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_DATA_DIR,
        default_factory=lambda: _detect_repo_root() / ".data",
    )


def default_db_path(env: Mapping[str, str] | None = None) -> Path:
    return default_data_dir(env) / DB_FILE_NAME


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Directory receiving rotating log files."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_LOG_DIR,
        default_factory=lambda: _detect_repo_root() / "logs",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    return default_log_dir(env) / LOG_FILE_NAME


__all__ = [
    "DB_FILE_NAME",
    "ENV_CONFIG_FILE",
    "ENV_DATA_DIR",
    "ENV_LOG_DIR",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_data_dir",
    "default_db_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
