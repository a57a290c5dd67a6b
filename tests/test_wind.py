import logging
import math

import pytest

from backend.core.exceptions import InvalidInput
from backend.core.wind import calculate_heading, calculate_wind_triangle, wind_components


def test_wind_components_headwind():
    comp = wind_components(90, 10, 90)
    assert math.isclose(comp.headwind, 10.0, abs_tol=0.1)
    assert math.isclose(comp.crosswind, 0.0, abs_tol=0.1)
    assert comp.tailwind == 0.0


def test_wind_components_tailwind_and_side():
    comp = wind_components(270, 10, 90)
    assert math.isclose(comp.tailwind, 10.0, abs_tol=0.1)
    assert wind_components(120, 10, 90).crosswind_side == "R"
    assert wind_components(60, 10, 90).crosswind_side == "L"


def test_wind_triangle_headwind():
    result = calculate_wind_triangle(120, 20, 0, 0)
    assert math.isclose(result.ground_speed, 100, abs_tol=1)
    assert math.isclose(result.wind_correction_angle, 0, abs_tol=1)


def test_wind_triangle_calm():
    result = calculate_wind_triangle(120, 0, 0, 45)
    assert result.ground_speed == pytest.approx(120)
    assert result.wind_correction_angle == pytest.approx(0)


def test_wind_triangle_crosswind_from_right():
    result = calculate_wind_triangle(120, 20, 90, 0)
    assert abs(result.wind_correction_angle) > 5
    assert result.wind_correction_angle == pytest.approx(9.594, abs=0.01)
    assert result.ground_speed < 120
    assert result.ground_speed == pytest.approx(118.32, abs=0.01)


def test_wind_triangle_crosswind_from_left_corrects_left():
    result = calculate_wind_triangle(120, 20, 270, 0)
    assert result.wind_correction_angle == pytest.approx(-9.594, abs=0.01)


def test_wind_triangle_correction_grows_with_wind_speed():
    light = calculate_wind_triangle(120, 10, 90, 0)
    strong = calculate_wind_triangle(120, 30, 90, 0)
    assert abs(strong.wind_correction_angle) > abs(light.wind_correction_angle)


def test_wind_triangle_extreme_tailwind():
    result = calculate_wind_triangle(120, 150, 180, 0)
    assert not math.isnan(result.ground_speed)
    assert not math.isnan(result.wind_correction_angle)
    assert result.ground_speed > 0
    assert result.ground_speed == pytest.approx(270, abs=0.01)


def test_wind_triangle_extreme_headwind_floors_at_zero():
    result = calculate_wind_triangle(120, 150, 0, 0)
    assert result.ground_speed == 0.0


def test_wind_triangle_extreme_crosswind_clamps_and_logs(caplog):
    with caplog.at_level(logging.WARNING, logger="flightcalc"):
        result = calculate_wind_triangle(100, 150, 90, 0)
    assert result.wind_correction_angle == pytest.approx(90)
    assert result.ground_speed >= 0
    assert not math.isnan(result.ground_speed)
    assert "cannot be held" in caplog.text


def test_wind_triangle_rejects_non_positive_airspeed():
    with pytest.raises(InvalidInput, match="True airspeed must be positive"):
        calculate_wind_triangle(0, 10, 0, 0)


def test_wind_triangle_rejects_negative_wind():
    with pytest.raises(InvalidInput, match="Wind speed"):
        calculate_wind_triangle(120, -5, 0, 0)


def test_calculate_heading_wraps():
    assert calculate_heading(355, 10) == pytest.approx(5)
    assert calculate_heading(5, -10) == pytest.approx(355)


def test_wind_components_no_crosswind_has_no_side():
    assert wind_components(0, 0, 90).crosswind_side == ""
    assert wind_components(90, 15, 90).crosswind_side == ""
