"""
Data models for flight planning calculations.
Provides immutable value records instead of loose dicts and tuples.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from backend.core.exceptions import InvalidInput


@dataclass(frozen=True)
class GeoPoint:
    """A geographic position in decimal degrees.

    Latitude is validated by the calculations that consume the point,
    not here, so an out-of-range point can still be constructed and
    reported back to the caller.
    """
    lat: float
    lon: float


@dataclass(frozen=True)
class WindTriangleResult:
    """Solution of the wind triangle for a single course.

    wind_correction_angle is positive when the heading must be turned
    right of course (wind from the right), negative for a left correction.
    """
    ground_speed: float
    wind_correction_angle: float


@dataclass(frozen=True)
class WindComponents:
    """Wind resolved along and across a course.

    headwind is positive on the nose and negative for a tailwind;
    crosswind is positive from the right.
    """
    headwind: float
    crosswind: float

    @property
    def tailwind(self) -> float:
        return max(0.0, -self.headwind)

    @property
    def crosswind_side(self) -> str:
        if self.crosswind == 0:
            return ""
        return "R" if self.crosswind > 0 else "L"


@dataclass(frozen=True)
class FuelOptions:
    """Optional contributions to a fuel plan.

    Attributes:
        reserve_minutes: Adds reserve_minutes/60 hours of fuel flow as reserve fuel
        alternate_distance: Distance to the alternate airport in NM
        alternate_ground_speed: Ground speed on the alternate leg in knots

    Alternate fuel is only added when both alternate fields are set.
    A field left as None contributes zero fuel.
    """
    reserve_minutes: Optional[float] = None
    alternate_distance: Optional[float] = None
    alternate_ground_speed: Optional[float] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "FuelOptions":
        """Build options from a plain dict.

        Keys may be the field names or their camelCase forms
        (reserveMinutes, alternateDistance, alternateGroundSpeed).

        Raises:
            InvalidInput: If a key is not a known fuel option, or a field
                is given under both spellings
        """
        options: Dict[str, Any] = {}
        for key, value in values.items():
            field_name = _FUEL_OPTION_ALIASES.get(key, key)
            if field_name not in _FUEL_OPTION_FIELDS:
                raise InvalidInput(f"Unknown fuel option: {key}")
            if field_name in options:
                raise InvalidInput(f"Fuel option given twice: {field_name}")
            options[field_name] = value
        return cls(**options)

    @property
    def has_alternate(self) -> bool:
        return self.alternate_distance is not None and self.alternate_ground_speed is not None


@dataclass(frozen=True)
class FuelPlanResult:
    """Fuel plan for one leg. Times in hours, fuel in US gallons."""
    flight_time: float
    fuel_used: float
    total_fuel: float
    alternate_fuel: float = 0.0
    reserve_fuel: float = 0.0


@dataclass(frozen=True)
class AircraftPerformance:
    """Caller-supplied aircraft performance figures.

    Speeds in knots, fuel flow in gal/hr, capacity in gallons,
    weights in pounds and arms in inches.
    """
    name: str
    cruise_speed: float
    fuel_flow: float
    fuel_capacity: float
    service_ceiling: Optional[int] = None
    empty_weight: float = 0.0
    empty_arm: float = 0.0


@dataclass(frozen=True)
class MassBalanceResult:
    """Loaded weight (lbs), moment (lb-in) and centre of gravity (in)."""
    total_weight: float
    total_moment: float
    center_of_gravity: float


@dataclass(frozen=True)
class LegPlan:
    """Everything computed for a single departure-to-arrival leg."""
    distance: float
    true_course: float
    heading: float
    wind: WindTriangleResult
    fuel: FuelPlanResult
    fuel_sufficient: bool


_FUEL_OPTION_FIELDS = frozenset(f.name for f in fields(FuelOptions))

# camelCase keys used by browser-side callers
_FUEL_OPTION_ALIASES: Dict[str, str] = {
    'reserveMinutes': 'reserve_minutes',
    'alternateDistance': 'alternate_distance',
    'alternateGroundSpeed': 'alternate_ground_speed',
}
