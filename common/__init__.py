"""
Common utilities shared across backend and the command-line front end.

This package contains utilities that need to be imported by both
backend and main without causing circular imports.
"""

from common.logger import debug, info, warning, error, get_log_file_path

__all__ = ["debug", "info", "warning", "error", "get_log_file_path"]
