"""
Reference data loaders for aircraft performance profiles and airports.

Both files are small CSVs bundled under data/:
- aircraft_profiles.csv (keyed by ICAO aircraft type code)
- airports.csv (keyed by ICAO airport code)

Loaded data is cached for the life of the process; call
clear_reference_cache() to force a reload.
"""

import csv
import threading
from pathlib import Path
from typing import Callable, Dict, Optional, TypeVar, Union

from common import logger as debug_logger
from common.paths import get_aircraft_profiles_path, get_airports_path
from backend.core.models import AircraftPerformance, GeoPoint

T = TypeVar("T")

# Thread-safe cache for reference data
_REFERENCE_LOCK = threading.Lock()
_AIRCRAFT_PROFILES: Optional[Dict[str, AircraftPerformance]] = None
_AIRPORTS: Optional[Dict[str, GeoPoint]] = None


def _optional_float(value: Optional[str]) -> float:
    value = (value or "").strip()
    return float(value) if value else 0.0


def _parse_aircraft_row(row: Dict[str, str]) -> AircraftPerformance:
    ceiling = (row.get("Service_Ceiling_FT") or "").strip()
    return AircraftPerformance(
        name=row.get("Name", "").strip() or row["ICAO_Code"].strip(),
        cruise_speed=float(row["Cruise_Speed_KT"]),
        fuel_flow=float(row["Fuel_Flow_GPH"]),
        fuel_capacity=float(row["Fuel_Capacity_GAL"]),
        service_ceiling=int(ceiling) if ceiling else None,
        empty_weight=_optional_float(row.get("Empty_Weight_LBS")),
        empty_arm=_optional_float(row.get("Empty_Arm_IN")),
    )


def _parse_airport_row(row: Dict[str, str]) -> GeoPoint:
    return GeoPoint(lat=float(row["latitude"]), lon=float(row["longitude"]))


def _read_csv(
    filename: Union[str, Path],
    key_column: str,
    parse_row: Callable[[Dict[str, str]], T],
    label: str,
) -> Dict[str, T]:
    """Read a keyed CSV file, skipping malformed rows.

    Returns:
        Dictionary mapping upper-cased key column values to parsed rows,
        or an empty dictionary if the file does not exist
    """
    records: Dict[str, T] = {}
    try:
        with open(filename, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            for line_number, row in enumerate(reader, start=2):
                code = (row.get(key_column) or "").strip().upper()
                if not code:
                    continue
                try:
                    records[code] = parse_row(row)
                except (KeyError, TypeError, ValueError) as e:
                    debug_logger.warning(f"Skipping {label} row {line_number} ({code}) in {filename}: {e}")
    except FileNotFoundError:
        debug_logger.warning(f"{label.capitalize()} data file '{filename}' not found")
        return {}

    debug_logger.info(f"Loaded {len(records)} {label} records from {filename}")
    return records


def load_aircraft_profiles(filename: Optional[Union[str, Path]] = None) -> Dict[str, AircraftPerformance]:
    """Load aircraft performance profiles.

    Args:
        filename: CSV path; defaults to the bundled data/aircraft_profiles.csv.
            An explicit path bypasses the cache.

    Returns:
        Dictionary mapping aircraft type codes (e.g. "C172") to AircraftPerformance
    """
    global _AIRCRAFT_PROFILES

    if filename is not None:
        return _read_csv(filename, "ICAO_Code", _parse_aircraft_row, "aircraft")

    with _REFERENCE_LOCK:
        if _AIRCRAFT_PROFILES is None:
            _AIRCRAFT_PROFILES = _read_csv(
                get_aircraft_profiles_path(), "ICAO_Code", _parse_aircraft_row, "aircraft"
            )
        return _AIRCRAFT_PROFILES


def load_airports(filename: Optional[Union[str, Path]] = None) -> Dict[str, GeoPoint]:
    """Load airport reference points.

    Args:
        filename: CSV path; defaults to the bundled data/airports.csv.
            An explicit path bypasses the cache.

    Returns:
        Dictionary mapping ICAO codes (e.g. "KJFK") to GeoPoint
    """
    global _AIRPORTS

    if filename is not None:
        return _read_csv(filename, "icao", _parse_airport_row, "airport")

    with _REFERENCE_LOCK:
        if _AIRPORTS is None:
            _AIRPORTS = _read_csv(get_airports_path(), "icao", _parse_airport_row, "airport")
        return _AIRPORTS


def get_aircraft(code: str) -> Optional[AircraftPerformance]:
    """Look up an aircraft profile by type code (case-insensitive)."""
    if not code:
        return None
    return load_aircraft_profiles().get(code.upper().strip())


def get_airport(code: str) -> Optional[GeoPoint]:
    """Look up an airport position by ICAO code (case-insensitive)."""
    if not code:
        return None
    return load_airports().get(code.upper().strip())


def clear_reference_cache() -> None:
    """Clear cached reference data."""
    global _AIRCRAFT_PROFILES, _AIRPORTS

    with _REFERENCE_LOCK:
        _AIRCRAFT_PROFILES = None
        _AIRPORTS = None
