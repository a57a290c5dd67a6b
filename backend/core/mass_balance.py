"""Weight and balance for a light single-engine aircraft.

Loads are in pounds except fuel, which is given in US gallons of avgas.
Station arms are the standard four-seat trainer stations in
backend.config.constants.
"""

from typing import Dict

from backend.config import constants
from backend.core.exceptions import InvalidInput
from backend.core.models import AircraftPerformance, MassBalanceResult


def calculate_mass_and_balance(
    aircraft: AircraftPerformance,
    pilot_weight: float,
    passenger_weight: float = 0.0,
    baggage_weight: float = 0.0,
    fuel_gallons: float = 0.0,
) -> MassBalanceResult:
    """
    Compute total weight, moment and centre of gravity.

    Args:
        aircraft: Aircraft providing empty weight and empty arm
        pilot_weight: Front seat load in lbs
        passenger_weight: Rear seat load in lbs
        baggage_weight: Baggage load in lbs
        fuel_gallons: Usable fuel on board in gallons

    Returns:
        MassBalanceResult; CG is 0.0 when the total weight is zero

    Raises:
        InvalidInput: If any load is negative
    """
    loads: Dict[str, float] = {
        "Pilot weight": pilot_weight,
        "Passenger weight": passenger_weight,
        "Baggage weight": baggage_weight,
        "Fuel quantity": fuel_gallons,
    }
    for label, value in loads.items():
        if not value >= 0:
            raise InvalidInput(f"{label} must not be negative")

    fuel_weight = fuel_gallons * constants.AVGAS_LBS_PER_GALLON

    total_weight = (aircraft.empty_weight + pilot_weight + passenger_weight
                    + baggage_weight + fuel_weight)
    total_moment = (aircraft.empty_weight * aircraft.empty_arm
                    + pilot_weight * constants.PILOT_ARM_IN
                    + passenger_weight * constants.PASSENGER_ARM_IN
                    + baggage_weight * constants.BAGGAGE_ARM_IN
                    + fuel_weight * constants.FUEL_ARM_IN)
    center_of_gravity = total_moment / total_weight if total_weight > 0 else 0.0

    return MassBalanceResult(
        total_weight=total_weight,
        total_moment=total_moment,
        center_of_gravity=center_of_gravity,
    )
