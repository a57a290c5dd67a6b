import os
import tempfile

# Keep test runs from writing debug logs into the user's data directory
os.environ.setdefault("FLIGHTCALC_LOG_DIR", tempfile.mkdtemp(prefix="flightcalc-logs-"))

import pytest  # noqa: E402

from backend.core.models import AircraftPerformance, GeoPoint  # noqa: E402
from backend.data.loaders import clear_reference_cache  # noqa: E402


@pytest.fixture
def jfk():
    return GeoPoint(lat=40.6413, lon=-73.7781)


@pytest.fixture
def lax():
    return GeoPoint(lat=33.9425, lon=-118.4081)


@pytest.fixture
def cessna172():
    return AircraftPerformance(
        name="Cessna 172S Skyhawk",
        cruise_speed=120,
        fuel_flow=9.5,
        fuel_capacity=56,
        service_ceiling=14000,
        empty_weight=1663,
        empty_arm=39.1,
    )


@pytest.fixture(autouse=True)
def _fresh_reference_cache():
    clear_reference_cache()
    yield
    clear_reference_cache()
