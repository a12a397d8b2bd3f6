"""Tests for the ``StorePathRichHandler`` path formatting utilities."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from cfgtree.platform.logging import StorePathRichHandler, setup_logger


def _make_handler() -> StorePathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return StorePathRichHandler(console=console)


def _build_record(msg: str = "Wrote configuration", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with store extras for testing."""

    record = logging.LogRecord(
        name="cfgtree",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_appends_store_path() -> None:
    handler = _make_handler()
    record = _build_record(store_path="/content/site/configs/cfg")

    rendered = handler.render_message(record, record.getMessage())

    assert isinstance(rendered, Text)
    assert rendered.plain == "Wrote configuration /content/site/configs/cfg"


def test_render_message_relativizes_to_store_root() -> None:
    handler = _make_handler()
    record = _build_record(
        store_path="/content/site/configs/cfg/item0",
        store_root="/content/site/configs",
    )

    plain = handler.render_message(record, record.getMessage()).plain

    assert plain.endswith(" cfg/item0")
    assert "/content/site" not in plain


def test_render_message_without_store_path_is_unchanged() -> None:
    handler = _make_handler()
    record = _build_record()

    assert handler.render_message(record, record.getMessage()).plain == "Wrote configuration"


def test_format_store_path_abbreviates_long_paths() -> None:
    path = "/" + "/".join(f"segment{index:02d}" for index in range(20))

    formatted = StorePathRichHandler.format_store_path(path)

    assert formatted.startswith("…/")
    assert formatted.endswith("segment19")
    assert len(formatted) <= 80


def test_setup_logger_attaches_rotating_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "cfgtree.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        logger.debug("file only")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(handler, StorePathRichHandler) for handler in logger.handlers)
        assert "file only" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_file_log_lines_carry_store_path(tmp_path: Path) -> None:
    log_file = tmp_path / "cfgtree.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        logger.info("Wrote configuration %s", "cfg", extra={"store_path": "/conf/configs/cfg"})
        for handler in logger.handlers:
            handler.flush()

        assert "Wrote configuration cfg [/conf/configs/cfg]" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
