"""
Summary: Architecture checks keeping persistence use cases isolated from platform database code.
Why: Use cases talk to the resource store port so adapters stay swappable.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
FEATURES_DIR = REPO_ROOT / "src" / "cfgtree" / "features"


def _imports(path: Path) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.lstrip().startswith(("import ", "from "))]


def _offending_files(directory: Path, forbidden: str) -> list[Path]:
    return [
        path for path in directory.rglob("*.py") if any(forbidden in line for line in _imports(path))
    ]


@pytest.mark.parametrize(
    "layer",
    [
        FEATURES_DIR / "persistence" / "domain",
        FEATURES_DIR / "persistence" / "usecases",
        FEATURES_DIR / "schema",
    ],
    ids=lambda path: str(path.relative_to(FEATURES_DIR)),
)
def test_layers_do_not_import_platform_db(layer: Path) -> None:
    """Ensure domain and use case modules avoid depending on platform database code."""

    offending = _offending_files(layer, "cfgtree.platform.db")
    assert offending == [], (
        "Domain and use case modules must not import platform database packages; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending)}"
    )


def test_persistence_domain_does_not_import_adapters() -> None:
    """Ensure the persistence domain stays independent of store adapters."""

    offending = _offending_files(FEATURES_DIR / "persistence" / "domain", "adapters")
    assert offending == [], (
        "Persistence domain modules must not reference adapters; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending)}"
    )
