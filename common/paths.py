"""Centralized path management for Flight Planning Calculations.

This module defines where reference data is read from and where logs
are written, so the library never writes into the project directory.

On Windows: %LOCALAPPDATA%/FlightCalc/
On macOS:   ~/Library/Application Support/FlightCalc/
On Linux:   ~/.local/share/FlightCalc/

Read-only data (e.g., data/aircraft_profiles.csv) remains in the project directory.
"""

import os
import sys
from pathlib import Path

# Application name for user data directory
APP_NAME = "FlightCalc"

# Environment variable that overrides the log directory (used by tests and CI)
LOG_DIR_ENV_VAR = "FLIGHTCALC_LOG_DIR"

# Project root directory (where main.py lives) - for read-only data
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()


def get_data_dir() -> Path:
    """Get the project's data directory (for read-only data files).

    This is where aircraft_profiles.csv and airports.csv live.

    Returns:
        Path to the project's data directory
    """
    return _PROJECT_ROOT / "data"


def get_user_data_dir() -> Path:
    """Get the user data directory for writable files.

    Returns:
        Path to the user data directory
    """
    if sys.platform == "win32":
        # Windows: %LOCALAPPDATA%/FlightCalc
        base = os.environ.get("LOCALAPPDATA")
        if not base:
            base = os.path.expanduser("~\\AppData\\Local")
        path = Path(base) / APP_NAME
    elif sys.platform == "darwin":
        # macOS: ~/Library/Application Support/FlightCalc
        path = Path.home() / "Library" / "Application Support" / APP_NAME
    else:
        # Linux/Unix: ~/.local/share/FlightCalc
        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            path = Path(xdg_data) / APP_NAME
        else:
            path = Path.home() / ".local" / "share" / APP_NAME

    return path


def get_user_logs_dir() -> Path:
    """Get the user logs directory.

    Honours FLIGHTCALC_LOG_DIR when set.

    Returns:
        Path to the logs directory within user data
    """
    override = os.environ.get(LOG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return get_user_data_dir() / "logs"


def get_aircraft_profiles_path() -> Path:
    """Get the path to the bundled aircraft performance profiles.

    Returns:
        Path to data/aircraft_profiles.csv
    """
    return get_data_dir() / "aircraft_profiles.csv"


def get_airports_path() -> Path:
    """Get the path to the bundled airport reference points.

    Returns:
        Path to data/airports.csv
    """
    return get_data_dir() / "airports.csv"
