"""Utility helpers for configuration file persistence."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in one rename.

    The text goes to a sibling temporary file first so a crash never leaves a
    half-written ``config.toml`` behind.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            _ = handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


__all__ = ["write_text_file"]
