"""Errors raised by the flight planning calculations.

Both error kinds subclass ValueError so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class FlightPlanningError(ValueError):
    """Base class for invalid flight planning input."""


class InvalidCoordinate(FlightPlanningError):
    """A latitude outside [-90, 90] was passed to a geodesy calculation."""


class InvalidInput(FlightPlanningError):
    """A speed, distance, fuel flow or load was outside its valid domain.

    The message names the offending parameter, e.g. "Distance must be positive".
    """
