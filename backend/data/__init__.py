"""Reference data (aircraft profiles, airports) for flight planning."""

from backend.data.loaders import (
    load_aircraft_profiles,
    load_airports,
    get_aircraft,
    get_airport,
    clear_reference_cache,
)

__all__ = [
    'load_aircraft_profiles',
    'load_airports',
    'get_aircraft',
    'get_airport',
    'clear_reference_cache',
]
