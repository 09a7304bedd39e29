"""Tests for the root logger setup driven by Settings."""

import logging
from contextlib import contextmanager

from product_api.app.core.config import Settings
from product_api.app.core.logging_config import setup_logging


@contextmanager
def bare_root_logger():
    """Run with no handlers on the root logger, restoring pytest's afterwards."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_level_and_log_file_from_settings(tmp_path):
    log_file = tmp_path / "api.log"
    with bare_root_logger() as root:
        setup_logging(Settings(log_level="debug", log_file=str(log_file)))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.getLogger("product_api.test").debug("created product %s", 7)
    assert "[DEBUG] product_api.test: created product 7" in log_file.read_text(encoding="utf-8")


def test_console_only_without_log_file():
    with bare_root_logger() as root:
        setup_logging(Settings(log_level="WARNING", log_file=None))
        assert root.level == logging.WARNING
        assert [type(h) for h in root.handlers] == [logging.StreamHandler]


def test_unknown_level_falls_back_to_info():
    with bare_root_logger() as root:
        setup_logging(Settings(log_level="chatty", log_file=None))
        assert root.level == logging.INFO


def test_second_call_keeps_existing_handlers():
    with bare_root_logger() as root:
        setup_logging(Settings(log_level="INFO", log_file=None))
        first = root.handlers[:]
        setup_logging(Settings(log_level="DEBUG", log_file=None))
        assert root.handlers == first
        assert root.level == logging.INFO
