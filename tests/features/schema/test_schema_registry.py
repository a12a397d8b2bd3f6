"""Tests for the configuration schema registry."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from cfgtree.features.schema import SchemaRegistry, SchemaResolver, configuration


@configuration(name="links")
class LinksConfig:
    pass


@configuration(name="links")
class OtherLinksConfig:
    pass


@configuration()
class ThemeConfig:
    pass


def test_registry_satisfies_resolver_protocol() -> None:
    assert isinstance(SchemaRegistry(), SchemaResolver)


def test_register_classes() -> None:
    registry = SchemaRegistry()

    registry.register_classes(LinksConfig, ThemeConfig)
    registry.register_classes(LinksConfig)

    assert registry.names == sorted(["links", f"{__name__}.ThemeConfig"])
    assert registry.get("links") is LinksConfig
    assert "links" in registry
    assert registry.resolve_config_name(ThemeConfig) == f"{__name__}.ThemeConfig"


def test_register_rejects_unmarked_and_duplicate_names() -> None:
    registry = SchemaRegistry()
    registry.register_classes(LinksConfig)

    with pytest.raises(ValueError):
        registry.register_classes(int)
    with pytest.raises(ValueError):
        registry.register_classes(OtherLinksConfig)


def test_register_modules_scans_packages(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    package = tmp_path / "cfgtree_sample_schemas"
    package.mkdir()
    _ = (package / "__init__.py").write_text(
        textwrap.dedent(
            """
            from cfgtree.features.schema import configuration

            @configuration(name="root.config")
            class RootConfig:
                pass
            """
        )
    )
    _ = (package / "nested.py").write_text(
        textwrap.dedent(
            """
            from cfgtree.features.schema import configuration
            from cfgtree_sample_schemas import RootConfig

            @configuration()
            class NestedConfig:
                pass

            class Helper:
                pass
            """
        )
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    registry = SchemaRegistry()
    registry.register_schemas(["cfgtree_sample_schemas", ThemeConfig])

    assert registry.names == sorted(
        [
            "root.config",
            "cfgtree_sample_schemas.nested.NestedConfig",
            f"{__name__}.ThemeConfig",
        ]
    )
