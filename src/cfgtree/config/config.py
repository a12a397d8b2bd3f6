"""Configuration management for cfgtree."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from cfgtree.config.file_ops import write_text_file
from cfgtree.config.paths import default_config_path
from cfgtree.platform.logging import logger

NAMING_STRATEGY_IDENTITY = "identity"
NAMING_STRATEGY_CHILD_SEGMENT = "child-segment"
RESERVED_PREFIX_DEFAULT = "meta:"
CONFIG_BUCKET_DEFAULT = "configs"
CHILD_SEGMENT_DEFAULT = "content"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # SQLite resource store used by the CLI
    db_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Naming strategy applied to logical configuration names
    naming_strategy: str = NAMING_STRATEGY_IDENTITY
    child_segment: str = CHILD_SEGMENT_DEFAULT
    redirect_collection_parent: bool = False

    # Storage layout
    reserved_prefix: str = RESERVED_PREFIX_DEFAULT
    config_bucket: str = CONFIG_BUCKET_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            destination = target or default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(destination, content)
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# cfgtree Configuration File")
        lines.append("")

        lines.append("# SQLite resource store used by the command line (optional)")
        lines.append('# Example: db_path = "/path/to/cfgtree.db"')
        if config["db_path"] is not None:
            lines.append(f"db_path = {self._format_toml_value(config['db_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Naming strategy: \"identity\" or \"child-segment\"")
        lines.append(f"naming_strategy = {self._format_toml_value(config['naming_strategy'])}")
        lines.append("# Child segment appended by the child-segment strategy")
        lines.append(f"child_segment = {self._format_toml_value(config['child_segment'])}")
        lines.append("# Also redirect collection parents through the child segment")
        lines.append(
            "redirect_collection_parent = "
            f"{self._format_toml_value(config['redirect_collection_parent'])}"
        )
        lines.append("")

        lines.append("# Properties starting with this prefix survive configuration writes")
        lines.append(f"reserved_prefix = {self._format_toml_value(config['reserved_prefix'])}")
        lines.append("# Node beneath the configuration root that holds configurations")
        lines.append(f"config_bucket = {self._format_toml_value(config['config_bucket'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without touching the filesystem.

        Args:
            config_file: Explicit file to read. Defaults to the portable location.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()

        try:
            if not source.exists():
                instance = cls()
            else:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", source)

            cls._instance = instance
            cls._loaded_from = source
            return instance

        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = [
    "CHILD_SEGMENT_DEFAULT",
    "CONFIG_BUCKET_DEFAULT",
    "Config",
    "NAMING_STRATEGY_CHILD_SEGMENT",
    "NAMING_STRATEGY_IDENTITY",
    "RESERVED_PREFIX_DEFAULT",
]
