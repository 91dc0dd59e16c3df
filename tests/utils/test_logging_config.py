"""
Tests for logging configuration.
"""

import logging

import pytest

from app.utils.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only():
    setup_logging(level="debug")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_file_handler(tmp_path):
    setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path / "logs"))
    logging.getLogger("movies").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello" in (tmp_path / "logs" / "api.log").read_text()


def test_get_logger_level_override():
    logger = get_logger("movies.test", level="warning")
    assert logger.level == logging.WARNING
