"""
Geodesy utilities for distance, bearing and display formatting.

All positions are GeoPoints in decimal degrees on a spherical Earth whose
radius matches the nautical mile (60 NM per degree of arc).
"""

import math

from backend.config.constants import COMPASS_POINTS, EARTH_RADIUS_NM, METERS_PER_KM, METERS_PER_NM
from backend.core.exceptions import InvalidCoordinate
from backend.core.models import GeoPoint


def _validate_latitude(point: GeoPoint) -> None:
    # Longitude is circular, so any real value is accepted
    if not (-90 <= point.lat <= 90):
        raise InvalidCoordinate(f"Invalid latitude: {point.lat} (must be between -90 and 90)")


def _same_position(a: GeoPoint, b: GeoPoint) -> bool:
    if a.lat != b.lat:
        return False
    # Every longitude names the same pole
    if abs(a.lat) == 90:
        return True
    return (a.lon - b.lon) % 360 == 0


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def calculate_great_circle_distance(a: GeoPoint, b: GeoPoint) -> float:
    """
    Calculate the great circle distance between two points
    on the earth (specified in decimal degrees).

    Uses the haversine formula over a mean radius of 3440.065 NM. The
    spherical model is accurate to within a few NM even at the antipode
    (0,0 to 0,180 gives ~10,807 NM against a nominal 10,800).

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in nautical miles (0.0 for coincident points, including the
        same pole or longitudes 360 degrees apart)

    Raises:
        InvalidCoordinate: If either latitude is outside [-90, 90]
    """
    _validate_latitude(a)
    _validate_latitude(b)

    if _same_position(a, b):
        return 0.0

    lat1_rad, lon1_rad, lat2_rad, lon2_rad = map(math.radians, [a.lat, a.lon, b.lat, b.lon])

    # Haversine formula
    dlon = lon2_rad - lon1_rad
    dlat = lat2_rad - lat1_rad
    h = math.sin(dlat/2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon/2)**2
    # Rounding can push h just outside [0, 1] for near-antipodal points
    h = _clamp(h, 0.0, 1.0)
    c = 2 * math.asin(math.sqrt(h))
    return c * EARTH_RADIUS_NM


def calculate_bearing(origin: GeoPoint, destination: GeoPoint) -> float:
    """
    Calculate initial great-circle bearing from origin to destination.

    Args:
        origin: Departure point
        destination: Destination point

    Returns:
        True bearing in degrees [0, 360), where 0=N, 90=E, 180=S, 270=W.
        Coincident points have no defined bearing and return 0.0.

    Raises:
        InvalidCoordinate: If either latitude is outside [-90, 90]
    """
    _validate_latitude(origin)
    _validate_latitude(destination)

    if _same_position(origin, destination):
        return 0.0

    lat1_rad = math.radians(origin.lat)
    lat2_rad = math.radians(destination.lat)
    delta_lon = math.radians(destination.lon - origin.lon)

    x = math.sin(delta_lon) * math.cos(lat2_rad)
    y = (math.cos(lat1_rad) * math.sin(lat2_rad) -
         math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(delta_lon))

    bearing = (math.degrees(math.atan2(x, y)) + 360) % 360
    # (-tiny + 360) % 360 can round up to exactly 360.0
    return 0.0 if bearing >= 360 else bearing


def bearing_to_compass(bearing: float) -> str:
    """
    Convert bearing in degrees to compass direction.

    Args:
        bearing: Bearing in degrees (0-360)

    Returns:
        Compass direction string (N, NE, E, SE, S, SW, W, NW)
    """
    index = round(bearing / 45) % 8
    return COMPASS_POINTS[index]


def format_distance(meters: float) -> str:
    """
    Format a measured distance for display.

    Args:
        meters: Distance in metres

    Returns:
        "850 m" below 1 km, "1.50 km" below 1 NM, otherwise "2.70 NM"
    """
    if meters < METERS_PER_KM:
        return f"{meters:.0f} m"
    elif meters < METERS_PER_NM:
        return f"{meters / METERS_PER_KM:.2f} km"
    return f"{meters / METERS_PER_NM:.2f} NM"


def format_ete(hours: float) -> str:
    """
    Format an estimated time en route.

    Args:
        hours: Time in hours

    Returns:
        Formatted string (e.g., "45m", "2h30m", or "<1m")
    """
    total_minutes = int(round(hours * 60))
    if total_minutes < 60:
        return f"{total_minutes}m" if total_minutes > 0 else "<1m"
    whole_hours, minutes = divmod(total_minutes, 60)
    return f"{whole_hours}h{minutes:02d}m"
