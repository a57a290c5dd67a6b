"""Wind triangle resolution and wind component utilities."""

import math

from common import logger as debug_logger
from backend.core.exceptions import InvalidInput
from backend.core.models import WindComponents, WindTriangleResult


def wind_components(wind_direction: float, wind_speed: float, course: float) -> WindComponents:
    """Resolve a wind (direction it blows FROM) along and across a course.

    Args:
        wind_direction: Wind direction in degrees true
        wind_speed: Wind speed in knots
        course: Course or runway heading in degrees true

    Returns:
        WindComponents with headwind (+ on the nose, - tailwind) and
        crosswind (+ from the right)
    """
    diff = math.radians((wind_direction - course + 360) % 360)
    return WindComponents(
        headwind=wind_speed * math.cos(diff),
        crosswind=wind_speed * math.sin(diff),
    )


def calculate_wind_triangle(
    true_airspeed: float,
    wind_speed: float,
    wind_direction: float,
    course_direction: float,
) -> WindTriangleResult:
    """
    Solve the wind triangle for a desired course.

    The wind is split into a crosswind component, which sets the wind
    correction angle, and a headwind component, which is subtracted from
    the airspeed's projection onto the course.

    When the crosswind exceeds the true airspeed the course cannot be held;
    the correction is clamped to +/-90 degrees and a warning is logged rather
    than raising, so callers always receive a defined result.

    Args:
        true_airspeed: True airspeed in knots (must be > 0)
        wind_speed: Wind speed in knots (must be >= 0)
        wind_direction: Direction the wind blows from, degrees true
        course_direction: Desired course, degrees true

    Returns:
        WindTriangleResult with ground speed (knots, >= 0) and
        wind correction angle (degrees, + = correct right)

    Raises:
        InvalidInput: If true_airspeed <= 0 or wind_speed < 0
    """
    if not true_airspeed > 0:
        raise InvalidInput("True airspeed must be positive")
    if not wind_speed >= 0:
        raise InvalidInput("Wind speed must not be negative")

    components = wind_components(wind_direction, wind_speed, course_direction)

    ratio = components.crosswind / true_airspeed
    if abs(ratio) > 1:
        debug_logger.warning(
            f"Crosswind {abs(components.crosswind):.1f} kt exceeds TAS {true_airspeed:.1f} kt; "
            f"course {course_direction:.0f} cannot be held, clamping correction angle"
        )
    wca_rad = math.asin(max(-1.0, min(1.0, ratio)))

    ground_speed = true_airspeed * math.cos(wca_rad) - components.headwind
    # A headwind stronger than the airspeed would mean flying backwards
    ground_speed = max(0.0, ground_speed)

    return WindTriangleResult(
        ground_speed=ground_speed,
        wind_correction_angle=math.degrees(wca_rad),
    )


def calculate_heading(course_direction: float, wind_correction_angle: float) -> float:
    """True heading to fly for a course and correction angle, in [0, 360)."""
    heading = (course_direction + wind_correction_angle) % 360
    return 0.0 if heading >= 360 else heading
