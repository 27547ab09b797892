from __future__ import annotations

import math

import pytest

from natalwheel.viz.core.geometry import (
    ANGLE_OFFSET_DEG,
    PolarPoint,
    angular_distance,
    normalize_degrees,
    project,
    to_radians,
)


@pytest.mark.parametrize(
    ("degree", "expected"),
    [
        (0.0, (250.0, 150.0)),
        (90.0, (350.0, 250.0)),
        (180.0, (250.0, 350.0)),
        (270.0, (150.0, 250.0)),
    ],
)
def test_project_cardinal_points(degree, expected):
    x, y = project(degree, 100.0, 250.0)
    assert x == pytest.approx(expected[0], abs=1e-9)
    assert y == pytest.approx(expected[1], abs=1e-9)


def test_project_wraps_out_of_range_degrees():
    for degree in (-90.0, 450.0, 720.0 + 45.0):
        wrapped = project(normalize_degrees(degree), 80.0, 100.0)
        raw = project(degree, 80.0, 100.0)
        assert raw == pytest.approx(wrapped, abs=1e-9)


def test_project_stays_on_the_circle():
    for degree in range(0, 360, 7):
        x, y = project(float(degree), 42.0, 10.0)
        assert math.hypot(x - 10.0, y - 10.0) == pytest.approx(42.0)


def test_to_radians_uses_fixed_offset():
    assert ANGLE_OFFSET_DEG == 270.0
    assert to_radians(0.0) == pytest.approx(3 * math.pi / 2)
    assert to_radians(270.0) == pytest.approx(0.0)


def test_normalize_and_distance():
    assert normalize_degrees(-10.0) == pytest.approx(350.0)
    assert normalize_degrees(360.0) == 0.0
    assert angular_distance(350.0, 10.0) == pytest.approx(20.0)
    assert angular_distance(0.0, 180.0) == pytest.approx(180.0)
    assert angular_distance(10.0, 370.0) == pytest.approx(0.0)


def test_polar_point_projects_like_function():
    point = PolarPoint(longitude=33.0, radius=120.0)
    assert point.project(250.0) == project(33.0, 120.0, 250.0)
