"""
Navigator Logging Configuration.

Sets up file logging so every navigation, hook run and failure is captured.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from datetime import datetime
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "panelnav"


def get_log_file_path(log_dir: Path | str = "logs") -> Path:
    """
    Get the path to the current log file.

    Parameters
    ----------
    log_dir : Path or str
        Directory containing log files (default: "logs")

    Returns
    -------
    Path
        Path to today's log file
    """
    return Path(log_dir) / f"panelnav_{datetime.now().strftime('%Y%m%d')}.log"


def setup_logging(log_dir: Path | str = "logs", level: int | str = logging.DEBUG) -> Path:
    """
    Set up logging for the navigator and the application built on it.

    Parameters
    ----------
    log_dir : Path or str
        Directory for log files (default: "logs")
    level : int or str
        Level applied to the ``panelnav`` logger (default: DEBUG)

    Returns
    -------
    Path
        Path to the current log file

    Notes
    -----
    - Creates rotating log files (max 10 MB, keeps 5 backups)
    - Log format: timestamp | level | module | message
    - Calling it again for the same file does not add a second handler
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = get_log_file_path(log_dir)

    nav_logger = logging.getLogger(LOGGER_NAME)
    nav_logger.setLevel(level)

    for handler in nav_logger.handlers:
        if isinstance(handler, RotatingFileHandler) and Path(handler.baseFilename) == Path(os.path.abspath(log_file)):
            return log_file

    formatter = logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    nav_logger.addHandler(file_handler)

    nav_logger.info("=" * 80)
    nav_logger.info("Navigator Session Started")
    nav_logger.info("=" * 80)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a panelnav module.

    Parameters
    ----------
    name : str
        Module name (e.g., 'panelnav.router')
    """
    return logging.getLogger(name)


def read_recent_logs(log_dir: Path | str = "logs", max_lines: int = 500) -> list[str]:
    """
    Read recent log entries from the current log file.

    Parameters
    ----------
    log_dir : Path or str
        Directory containing log files (default: "logs")
    max_lines : int
        Maximum number of lines to return (default: 500)

    Returns
    -------
    list[str]
        List of log lines (most recent last)
    """
    log_file = get_log_file_path(log_dir)

    if not log_file.exists():
        return ["No log file found for today."]

    with open(log_file, 'r', encoding='utf-8') as f:
        lines = f.readlines()
    return lines[-max_lines:]
