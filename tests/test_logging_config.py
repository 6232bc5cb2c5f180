"""Tests for rotating-file logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from panelnav.logging_config import (
    get_log_file_path,
    get_logger,
    read_recent_logs,
    setup_logging,
)


@pytest.fixture
def nav_logger():
    logger = logging.getLogger("panelnav")
    saved = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
            handler.close()


def test_setup_creates_log_file(tmp_path, nav_logger):
    log_file = setup_logging(tmp_path / "logs")

    assert log_file == get_log_file_path(tmp_path / "logs")
    assert log_file.exists()
    assert log_file.name.startswith("panelnav_")


def test_setup_is_idempotent(tmp_path, nav_logger):
    setup_logging(tmp_path)
    setup_logging(tmp_path)

    handlers = [h for h in nav_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len([h for h in handlers if str(tmp_path) in h.baseFilename]) == 1


def test_child_loggers_reach_file(tmp_path, nav_logger):
    setup_logging(tmp_path)
    get_logger("panelnav.router").info("navigated somewhere")
    for handler in nav_logger.handlers:
        handler.flush()

    lines = read_recent_logs(tmp_path)
    assert any("navigated somewhere" in line for line in lines)
    assert any("| INFO     | panelnav.router |" in line for line in lines)


def test_read_recent_logs_without_file(tmp_path):
    assert read_recent_logs(tmp_path) == ["No log file found for today."]


def test_read_recent_logs_limit(tmp_path, nav_logger):
    setup_logging(tmp_path)
    for i in range(20):
        get_logger("panelnav.test").info(f"line {i}")
    for handler in nav_logger.handlers:
        handler.flush()

    lines = read_recent_logs(tmp_path, max_lines=3)
    assert len(lines) == 3
    assert "line 19" in lines[-1]
