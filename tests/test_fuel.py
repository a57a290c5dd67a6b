import math

import pytest

from backend.core.exceptions import InvalidInput
from backend.core.fuel import calculate_fuel_consumption, is_fuel_sufficient, plan_trip_fuel
from backend.core.models import FuelOptions


def test_basic_fuel_consumption():
    plan = calculate_fuel_consumption(300, 120, 10)
    assert math.isclose(plan.flight_time, 2.5, abs_tol=0.05)
    assert math.isclose(plan.fuel_used, 25, abs_tol=0.05)
    assert plan.reserve_fuel == 0
    assert plan.alternate_fuel == 0
    assert plan.total_fuel == plan.fuel_used


def test_fuel_reserve():
    plan = calculate_fuel_consumption(300, 120, 10, FuelOptions(reserve_minutes=45))
    expected_reserve = (45 / 60) * 10
    assert plan.reserve_fuel == pytest.approx(expected_reserve)
    assert math.isclose(plan.total_fuel, plan.fuel_used + expected_reserve, abs_tol=0.05)


def test_fuel_options_accepts_mapping():
    plan = calculate_fuel_consumption(300, 120, 10, {"reserve_minutes": 45})
    assert plan.total_fuel == pytest.approx(32.5)


def test_alternate_fuel():
    plan = calculate_fuel_consumption(
        300, 120, 10, FuelOptions(alternate_distance=50, alternate_ground_speed=110)
    )
    assert plan.alternate_fuel > 0
    assert plan.alternate_fuel == pytest.approx(50 / 110 * 10)
    assert plan.total_fuel > plan.fuel_used


def test_alternate_uses_its_own_ground_speed():
    slow = calculate_fuel_consumption(300, 120, 10, FuelOptions(alternate_distance=50, alternate_ground_speed=50))
    fast = calculate_fuel_consumption(300, 120, 10, FuelOptions(alternate_distance=50, alternate_ground_speed=100))
    assert slow.alternate_fuel == pytest.approx(10)
    assert fast.alternate_fuel == pytest.approx(5)


def test_alternate_needs_both_fields():
    plan = calculate_fuel_consumption(300, 120, 10, FuelOptions(alternate_distance=50))
    assert plan.alternate_fuel == 0


def test_reserve_and_alternate_combined():
    options = FuelOptions(reserve_minutes=30, alternate_distance=60, alternate_ground_speed=120)
    plan = calculate_fuel_consumption(300, 120, 10, options)
    assert plan.total_fuel == pytest.approx(25 + 5 + 5)


@pytest.mark.parametrize(
    "args, message",
    [
        ((-100, 120, 10), "Distance must be positive"),
        ((0, 120, 10), "Distance must be positive"),
        ((100, 0, 10), "Ground speed must be positive"),
        ((100, 120, 0), "Fuel flow must be positive"),
    ],
)
def test_fuel_rejects_non_positive_inputs(args, message):
    with pytest.raises(InvalidInput, match=message):
        calculate_fuel_consumption(*args)


def test_fuel_rejects_negative_reserve():
    with pytest.raises(InvalidInput, match="Reserve minutes"):
        calculate_fuel_consumption(100, 120, 10, FuelOptions(reserve_minutes=-5))


def test_fuel_rejects_zero_alternate_ground_speed():
    with pytest.raises(InvalidInput, match="Alternate ground speed must be positive"):
        calculate_fuel_consumption(100, 120, 10, FuelOptions(alternate_distance=20, alternate_ground_speed=0))


def test_plan_trip_fuel_default_reserve():
    plan = plan_trip_fuel(1.5, 10)
    assert plan.fuel_used == pytest.approx(15)
    assert plan.reserve_fuel == pytest.approx(7.5)
    assert plan.total_fuel == pytest.approx(22.5)


def test_plan_trip_fuel_without_reserve():
    assert plan_trip_fuel(2, 9.5, reserve_minutes=None).total_fuel == pytest.approx(19)


def test_is_fuel_sufficient():
    plan = plan_trip_fuel(1.5, 10)
    assert is_fuel_sufficient(plan, 56)
    assert not is_fuel_sufficient(plan, 20)


def test_fuel_options_accepts_camel_case_keys():
    plan = calculate_fuel_consumption(
        300, 120, 10,
        {"reserveMinutes": 45, "alternateDistance": 50, "alternateGroundSpeed": 100},
    )
    assert plan.reserve_fuel == pytest.approx(7.5)
    assert plan.alternate_fuel == pytest.approx(5)
    assert plan.total_fuel == pytest.approx(37.5)


def test_fuel_options_rejects_unknown_key():
    with pytest.raises(InvalidInput, match="Unknown fuel option: reserve_mins"):
        calculate_fuel_consumption(300, 120, 10, {"reserve_mins": 45})


def test_fuel_options_rejects_duplicate_spelling():
    with pytest.raises(InvalidInput, match="given twice"):
        FuelOptions.from_mapping({"reserve_minutes": 30, "reserveMinutes": 45})
