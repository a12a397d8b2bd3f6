"""Rich logging handlers.

Where: platform/logging/handlers.py
What: Render store paths attached to log records as a trailing, highlighted segment.
Why: Keep persistence log lines readable when recursive writes touch deep paths.
"""

from __future__ import annotations

import logging
from typing import Final, override

from rich.logging import RichHandler
from rich.text import Text

_PATH_STYLE: Final[str] = "bold white"
_MAX_PATH_LENGTH: Final[int] = 80
_ELLIPSIS: Final[str] = "…"


class StorePathRichHandler(RichHandler):
    """Rich handler that appends a ``store_path`` extra to the message.

    Records may carry ``store_path`` and, optionally, ``store_root``. When the
    path lives beneath the root it is shown relative to it; otherwise long
    paths are abbreviated from the left.
    """

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        rendered = super().render_message(record, message)
        store_path = getattr(record, "store_path", None)
        if not isinstance(store_path, str) or not store_path:
            return rendered

        text = rendered if isinstance(rendered, Text) else Text(str(rendered))
        display_path = self.format_store_path(store_path, getattr(record, "store_root", None))
        if text.plain:
            _ = text.append(" ")
        _ = text.append(display_path, style=_PATH_STYLE)
        return text

    @staticmethod
    def format_store_path(path: str, root: object | None = None) -> str:
        """Return ``path`` relative to ``root`` when possible, abbreviated otherwise."""

        if isinstance(root, str) and root:
            prefix = root.rstrip("/") + "/"
            if path.startswith(prefix) and len(path) > len(prefix):
                return path[len(prefix):]

        if len(path) <= _MAX_PATH_LENGTH:
            return path

        segments = path.split("/")
        kept: list[str] = []
        length = len(_ELLIPSIS)
        for segment in reversed(segments):
            if kept and length + len(segment) + 1 > _MAX_PATH_LENGTH:
                break
            kept.insert(0, segment)
            length += len(segment) + 1
        return _ELLIPSIS + "/" + "/".join(kept)


__all__ = ["StorePathRichHandler"]
