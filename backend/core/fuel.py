"""Fuel planning for a single leg.

Distances are in nautical miles, speeds in knots, fuel flow in US gallons
per hour, and results in hours and gallons.
"""

from typing import Any, Mapping, Optional, Union

from backend.config.constants import DEFAULT_RESERVE_MINUTES
from backend.core.exceptions import InvalidInput
from backend.core.models import FuelOptions, FuelPlanResult


def _require_positive(value: float, message: str) -> None:
    # "not >" so that NaN is rejected too
    if not value > 0:
        raise InvalidInput(message)


def _coerce_options(options: Union[FuelOptions, Mapping[str, Any], None]) -> FuelOptions:
    if options is None:
        return FuelOptions()
    if isinstance(options, FuelOptions):
        return options
    return FuelOptions.from_mapping(options)


def calculate_fuel_consumption(
    distance: float,
    ground_speed: float,
    fuel_flow: float,
    options: Union[FuelOptions, Mapping[str, Any], None] = None,
) -> FuelPlanResult:
    """
    Calculate flight time and fuel for a leg, with optional reserve and alternate.

    Args:
        distance: Leg distance in NM
        ground_speed: Ground speed in knots
        fuel_flow: Fuel flow in gal/hr
        options: FuelOptions (or a dict with the same keys). reserve_minutes
            adds that many minutes of fuel flow; alternate_distance together
            with alternate_ground_speed adds the fuel to fly to the alternate
            at its own ground speed.

    Returns:
        FuelPlanResult with flight_time, fuel_used, total_fuel,
        alternate_fuel and reserve_fuel

    Raises:
        InvalidInput: If distance, ground speed or fuel flow is not positive,
            or an option is outside its domain
    """
    _require_positive(distance, "Distance must be positive")
    _require_positive(ground_speed, "Ground speed must be positive")
    _require_positive(fuel_flow, "Fuel flow must be positive")

    opts = _coerce_options(options)

    flight_time = distance / ground_speed
    fuel_used = flight_time * fuel_flow

    reserve_fuel = 0.0
    if opts.reserve_minutes is not None:
        if not opts.reserve_minutes >= 0:
            raise InvalidInput("Reserve minutes must not be negative")
        reserve_fuel = (opts.reserve_minutes / 60) * fuel_flow

    alternate_fuel = 0.0
    if opts.has_alternate:
        _require_positive(opts.alternate_distance, "Alternate distance must be positive")
        _require_positive(opts.alternate_ground_speed, "Alternate ground speed must be positive")
        alternate_fuel = (opts.alternate_distance / opts.alternate_ground_speed) * fuel_flow

    return FuelPlanResult(
        flight_time=flight_time,
        fuel_used=fuel_used,
        total_fuel=fuel_used + reserve_fuel + alternate_fuel,
        alternate_fuel=alternate_fuel,
        reserve_fuel=reserve_fuel,
    )


def plan_trip_fuel(
    ete_hours: float,
    fuel_burn: float,
    reserve_minutes: Optional[float] = DEFAULT_RESERVE_MINUTES,
) -> FuelPlanResult:
    """Fuel plan from an estimated time en route instead of a distance.

    Args:
        ete_hours: Estimated time en route in hours
        fuel_burn: Fuel burn in gal/hr
        reserve_minutes: Reserve to add, 45 minutes by default; None for no reserve

    Returns:
        FuelPlanResult (alternate_fuel is always 0)
    """
    _require_positive(ete_hours, "Time en route must be positive")
    _require_positive(fuel_burn, "Fuel flow must be positive")

    trip_fuel = ete_hours * fuel_burn
    reserve_fuel = 0.0
    if reserve_minutes is not None:
        if not reserve_minutes >= 0:
            raise InvalidInput("Reserve minutes must not be negative")
        reserve_fuel = (reserve_minutes / 60) * fuel_burn

    return FuelPlanResult(
        flight_time=ete_hours,
        fuel_used=trip_fuel,
        total_fuel=trip_fuel + reserve_fuel,
        reserve_fuel=reserve_fuel,
    )


def is_fuel_sufficient(plan: FuelPlanResult, fuel_capacity: float) -> bool:
    """Check whether the total fuel required fits in the tanks."""
    return plan.total_fuel <= fuel_capacity
