"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the console and rotating file handlers of the ``cfgtree`` logger.
Why: Persistence code logs store paths as extras; both sinks must render them.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final, override

from rich.console import Console

from cfgtree.config.paths import default_log_file

from .handlers import StorePathRichHandler

LOGGER_NAME: Final[str] = "cfgtree"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT: Final[int] = 5


class StorePathFormatter(logging.Formatter):
    """Plain formatter that appends ``[store_path]`` when a record carries one."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @override
    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        store_path = getattr(record, "store_path", None)
        if isinstance(store_path, str) and store_path:
            return f"{formatted} [{store_path}]"
        return formatted


def _console_handler(level: int) -> logging.Handler:
    handler = StorePathRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    resolved = Path(log_file).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(StorePathFormatter())
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``cfgtree`` logger.

    Args:
        log_file: Rotating log file; console only when omitted.
        console_level: Threshold of the Rich console handler.
        file_level: Threshold of the file handler.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))
    return logger


# The file handler is attached by the CLI once the configured log file is known.
logger: Final[logging.Logger] = setup_logger()


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "StorePathFormatter",
    "logger",
    "setup_logger",
]
