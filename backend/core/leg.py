"""
Single-leg flight planning.

Chains the geodesy, wind triangle and fuel calculations for one
departure-to-arrival leg flown at the aircraft's cruise speed.
"""

from typing import Any, Mapping, Optional, Union

from common import logger as debug_logger
from backend.core.calculations import calculate_bearing, calculate_great_circle_distance
from backend.core.fuel import calculate_fuel_consumption, is_fuel_sufficient
from backend.core.models import AircraftPerformance, FuelOptions, GeoPoint, LegPlan
from backend.core.wind import calculate_heading, calculate_wind_triangle


def plan_leg(
    departure: GeoPoint,
    arrival: GeoPoint,
    aircraft: AircraftPerformance,
    wind_direction: float = 0.0,
    wind_speed: float = 0.0,
    options: Optional[Union[FuelOptions, Mapping[str, Any]]] = None,
) -> LegPlan:
    """
    Plan a single leg.

    Args:
        departure: Departure position
        arrival: Arrival position
        aircraft: Aircraft whose cruise speed is used as true airspeed
        wind_direction: Wind direction (from) in degrees true
        wind_speed: Wind speed in knots
        options: Reserve and alternate options passed to the fuel planner

    Returns:
        LegPlan with distance, true course, heading, wind solution,
        fuel plan and whether the fuel fits the aircraft's capacity

    Raises:
        InvalidCoordinate: If either position has an invalid latitude
        InvalidInput: If the legs are coincident, or the wind leaves no
            positive ground speed
    """
    distance = calculate_great_circle_distance(departure, arrival)
    true_course = calculate_bearing(departure, arrival)

    wind = calculate_wind_triangle(aircraft.cruise_speed, wind_speed, wind_direction, true_course)
    heading = calculate_heading(true_course, wind.wind_correction_angle)

    fuel = calculate_fuel_consumption(distance, wind.ground_speed, aircraft.fuel_flow, options)
    sufficient = is_fuel_sufficient(fuel, aircraft.fuel_capacity)

    debug_logger.debug(
        f"Leg {aircraft.name}: {distance:.1f} NM TC {true_course:03.0f} HDG {heading:03.0f} "
        f"GS {wind.ground_speed:.0f} kt, {fuel.total_fuel:.1f} gal "
        f"({'OK' if sufficient else 'EXCEEDS'} {aircraft.fuel_capacity:.0f} gal)"
    )
    if not sufficient:
        debug_logger.warning(
            f"Fuel required {fuel.total_fuel:.1f} gal exceeds {aircraft.name} capacity "
            f"of {aircraft.fuel_capacity:.0f} gal"
        )

    return LegPlan(
        distance=distance,
        true_course=true_course,
        heading=heading,
        wind=wind,
        fuel=fuel,
        fuel_sufficient=sufficient,
    )
