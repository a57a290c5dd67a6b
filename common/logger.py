"""
Centralized logging module for Flight Planning Calculations.

This module provides logging to a daily debug file for tracking issues.
It is designed to be imported by both backend and the command-line
front end without causing circular imports.
"""

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from common.paths import get_user_logs_dir

LOGGER_NAME = 'flightcalc'


def cleanup_old_logs(logs_dir: Path, days_to_keep: int = 10) -> None:
    """Remove log files older than the specified number of days."""
    try:
        cutoff_date = datetime.now() - timedelta(days=days_to_keep)

        for log_file in logs_dir.glob('debug_*.log'):
            try:
                file_mtime = datetime.fromtimestamp(log_file.stat().st_mtime)
                if file_mtime < cutoff_date:
                    log_file.unlink()
            except OSError:
                continue
    except OSError:
        return


def _create_file_handler() -> Optional[logging.Handler]:
    """Create the daily file handler, or None if the logs directory is not writable."""
    logs_dir = get_user_logs_dir()
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None

    cleanup_old_logs(logs_dir)

    # One file per day
    log_file = logs_dir / f'debug_{datetime.now().strftime("%Y%m%d")}.log'
    try:
        handler = logging.FileHandler(log_file, encoding='utf-8')
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s.%(msecs)03d | %(levelname)-8s | %(message)s',
        datefmt='%H:%M:%S'
    ))
    return handler


# Configure logger
_logger = logging.getLogger(LOGGER_NAME)
_logger.setLevel(logging.DEBUG)

# Only add handler if not already added (prevents duplicate handlers on reimport)
if not _logger.handlers:
    _file_handler = _create_file_handler()
    _logger.addHandler(_file_handler if _file_handler is not None else logging.NullHandler())


def add_console_handler(level: int = logging.DEBUG) -> None:
    """Mirror log records to stderr (used by the CLI's --verbose mode)."""
    for handler in _logger.handlers:
        if getattr(handler, '_flightcalc_console', False):
            return
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    console_handler._flightcalc_console = True
    _logger.addHandler(console_handler)


def debug(message: str) -> None:
    """Log a debug message."""
    _logger.debug(message)


def info(message: str) -> None:
    """Log an info message."""
    _logger.info(message)


def warning(message: str) -> None:
    """Log a warning message."""
    _logger.warning(message)


def error(message: str) -> None:
    """Log an error message."""
    _logger.error(message)


def get_log_file_path() -> Optional[str]:
    """Get the path to the current log file, if file logging is active."""
    for handler in _logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return handler.baseFilename
    return None
