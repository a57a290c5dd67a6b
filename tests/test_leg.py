import pytest

from backend.core.exceptions import InvalidCoordinate, InvalidInput
from backend.core.leg import plan_leg
from backend.core.models import FuelOptions, GeoPoint


def test_plan_leg_calm_short_hop(cessna172):
    leg = plan_leg(GeoPoint(40, -74), GeoPoint(41, -74), cessna172)
    assert leg.distance == pytest.approx(60.0, abs=0.05)
    assert leg.true_course == pytest.approx(0, abs=1)
    assert leg.heading == pytest.approx(leg.true_course)
    assert leg.wind.ground_speed == pytest.approx(120)
    assert leg.fuel.flight_time == pytest.approx(0.5, abs=0.01)
    assert leg.fuel.fuel_used == pytest.approx(4.75, abs=0.05)
    assert leg.fuel_sufficient


def test_plan_leg_with_wind_and_reserve(cessna172):
    leg = plan_leg(
        GeoPoint(40, -74), GeoPoint(41, -74), cessna172,
        wind_direction=90, wind_speed=20, options=FuelOptions(reserve_minutes=45),
    )
    # Wind from the right of a northbound course: correct right
    assert leg.wind.wind_correction_angle > 5
    assert 5 < leg.heading < 15
    assert leg.wind.ground_speed < 120
    assert leg.fuel.reserve_fuel == pytest.approx(7.125)


def test_plan_leg_exceeding_capacity(cessna172):
    # KORD to KDEN is ~770 NM, about 61 gal in a C172 against 56 gal tanks
    leg = plan_leg(GeoPoint(41.9742, -87.9073), GeoPoint(39.8561, -104.6737), cessna172)
    assert leg.distance == pytest.approx(770, abs=1)
    assert not leg.fuel_sufficient


def test_plan_leg_invalid_latitude(cessna172):
    with pytest.raises(InvalidCoordinate):
        plan_leg(GeoPoint(91, 0), GeoPoint(0, 0), cessna172)


def test_plan_leg_headwind_stronger_than_airspeed(cessna172):
    with pytest.raises(InvalidInput, match="Ground speed must be positive"):
        plan_leg(GeoPoint(40, -74), GeoPoint(41, -74), cessna172, wind_direction=0, wind_speed=150)
