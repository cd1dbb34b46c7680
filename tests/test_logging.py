"""Tests for docletrd.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from docletrd.logging import configure_logging, get_logger, resolve_level


def test_get_logger_is_namespaced() -> None:
    assert get_logger().name == "docletrd"
    assert get_logger("publisher").name == "docletrd.publisher"


def test_resolve_level_prefers_verbose() -> None:
    assert resolve_level() == logging.INFO
    assert resolve_level(quiet=True) == logging.WARNING
    assert resolve_level(verbose=True, quiet=True) == logging.DEBUG


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(quiet=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_configure_logging_file_sink_captures_debug(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "docletrd.log"
    logger = configure_logging(log_file=log_file)

    get_logger("publisher").debug("DOCLET: function alpha alpha")
    for handler in logger.handlers:
        handler.flush()

    assert "DOCLET: function alpha alpha" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
