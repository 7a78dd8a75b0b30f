"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import math

import pytest

from services.pacer.models import RoutePoint
from utils.elevation import elevation_delta, grade_percent, grades_percent, net_grade_percent


@pytest.fixture
def route(route_factory):
    return route_factory([0, 100, 200, 300, 400], [0, 10, 5, 20, 20])


def test_elevation_delta_whole_route(route) -> None:
    assert elevation_delta(route, 0, 400) == pytest.approx((25.0, 5.0))


def test_elevation_delta_sub_range(route) -> None:
    assert elevation_delta(route, 100, 300) == pytest.approx((15.0, 5.0))
    # Only pairs fully inside the range count
    assert elevation_delta(route, 50, 250) == pytest.approx((0.0, 5.0))


def test_grade_percent() -> None:
    prev = RoutePoint(lat=45.0, lon=5.0, elevation_m=100.0, distance_m=1000.0)
    nxt = RoutePoint(lat=45.0, lon=5.0, elevation_m=105.0, distance_m=1100.0)
    assert grade_percent(prev, nxt) == pytest.approx(5.0)
    assert grade_percent(nxt, RoutePoint(45.0, 5.0, 95.0, 1200.0)) == pytest.approx(-10.0)


def test_grade_percent_zero_run_is_finite() -> None:
    prev = RoutePoint(lat=45.0, lon=5.0, elevation_m=100.0, distance_m=1000.0)
    same_spot = RoutePoint(lat=45.0, lon=5.0, elevation_m=101.0, distance_m=1000.0)
    assert math.isfinite(grade_percent(prev, same_spot))
    assert grade_percent(prev, prev) == 0.0


def test_grades_percent(route) -> None:
    assert grades_percent(route).tolist() == pytest.approx([10.0, -5.0, 15.0, 0.0])


def test_net_grade_percent() -> None:
    assert net_grade_percent(100.0, 0.0, 1000.0) == pytest.approx(10.0)
    assert net_grade_percent(20.0, 50.0, 1000.0) == pytest.approx(-3.0)
    assert net_grade_percent(20.0, 50.0, 0.0) == 0.0
