"""
Configuration constants and settings for Flight Planning Calculations.
"""

# Mean Earth radius in nautical miles (60 NM per degree of arc)
EARTH_RADIUS_NM = 3440.065

# Metres per nautical mile / kilometre (used for distance display)
METERS_PER_NM = 1852.0
METERS_PER_KM = 1000.0

# Default VFR fuel reserve (minutes of cruise fuel flow)
DEFAULT_RESERVE_MINUTES = 45

# Avgas density in pounds per US gallon
AVGAS_LBS_PER_GALLON = 6.0

# Loading station arms in inches aft of datum (light single-engine)
PILOT_ARM_IN = 37.0
PASSENGER_ARM_IN = 73.0
BAGGAGE_ARM_IN = 95.0
FUEL_ARM_IN = 48.0

# Eight-point compass rose, clockwise from north
COMPASS_POINTS = ['N', 'NE', 'E', 'SE', 'S', 'SW', 'W', 'NW']
