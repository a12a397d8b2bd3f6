"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from cfgtree.config.paths import (
    default_config_path,
    default_data_dir,
    default_db_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "cfgtree.log"


def test_default_config_and_data_paths(portable_repo_root: Path) -> None:
    """Config and store files default to repository-local locations."""

    assert default_config_path() == portable_repo_root / "config" / "config.toml"
    assert default_data_dir() == portable_repo_root / ".data"
    assert default_db_path() == portable_repo_root / ".data" / "cfgtree.db"


def test_data_dir_env_override(
    portable_repo_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``CFGTREE_DATA_DIR`` relocates the data directory."""

    _ = portable_repo_root
    override = tmp_path / "elsewhere"
    monkeypatch.setenv("CFGTREE_DATA_DIR", str(override))

    assert default_data_dir() == override.resolve()
    assert default_data_dir(env={"CFGTREE_DATA_DIR": "  "}) == portable_repo_root / ".data"


def test_explicit_path_wins(tmp_path: Path) -> None:
    """Explicit paths take precedence over environment and defaults."""

    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"VAR": str(tmp_path / "env")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "explicit").resolve()


def test_config_and_log_env_overrides(portable_repo_root: Path, tmp_path: Path) -> None:
    """Settings file and log directory honour their own overrides."""

    env = {
        "CFGTREE_CONFIG_FILE": str(tmp_path / "etc" / "cfgtree.toml"),
        "CFGTREE_LOG_DIR": str(tmp_path / "var" / "log"),
    }

    assert default_config_path(env) == (tmp_path / "etc" / "cfgtree.toml").resolve()
    assert default_log_file(env) == (tmp_path / "var" / "log" / "cfgtree.log").resolve()
    assert default_db_path(env) == portable_repo_root / ".data" / "cfgtree.db"
