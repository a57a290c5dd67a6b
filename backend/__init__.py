"""
Flight Planning Calculations Backend
Great-circle geodesy, wind triangle and fuel planning for single legs.
"""

# Import value models and errors
from backend.core.models import (
    GeoPoint,
    WindTriangleResult,
    WindComponents,
    FuelOptions,
    FuelPlanResult,
    AircraftPerformance,
    MassBalanceResult,
    LegPlan,
)
from backend.core.exceptions import FlightPlanningError, InvalidCoordinate, InvalidInput

# Import calculation utilities
from backend.core.calculations import (
    calculate_great_circle_distance,
    calculate_bearing,
    bearing_to_compass,
    format_distance,
    format_ete,
)

# Import wind functions
from backend.core.wind import calculate_wind_triangle, calculate_heading, wind_components

# Import fuel and loading functions
from backend.core.fuel import calculate_fuel_consumption, plan_trip_fuel, is_fuel_sufficient
from backend.core.mass_balance import calculate_mass_and_balance
from backend.core.leg import plan_leg

# Import data loaders
from backend.data.loaders import get_aircraft, get_airport, load_aircraft_profiles, load_airports

__version__ = "1.0.0"

# Export public API
__all__ = [
    'GeoPoint',
    'WindTriangleResult',
    'WindComponents',
    'FuelOptions',
    'FuelPlanResult',
    'AircraftPerformance',
    'MassBalanceResult',
    'LegPlan',
    'FlightPlanningError',
    'InvalidCoordinate',
    'InvalidInput',
    'calculate_great_circle_distance',
    'calculate_bearing',
    'bearing_to_compass',
    'format_distance',
    'format_ete',
    'calculate_wind_triangle',
    'calculate_heading',
    'wind_components',
    'calculate_fuel_consumption',
    'plan_trip_fuel',
    'is_fuel_sufficient',
    'calculate_mass_and_balance',
    'plan_leg',
    'get_aircraft',
    'get_airport',
    'load_aircraft_profiles',
    'load_airports',
]
