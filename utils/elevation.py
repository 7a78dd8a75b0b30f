"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Elevation-related helpers.
"""

from __future__ import annotations

import numpy as np

from config import GRADE_MIN_STEP_M
from services.pacer.models import Route, RoutePoint


def elevation_delta(route: Route, start_m: float, end_m: float) -> tuple[float, float]:
    """Sum elevation gain and loss between two distances.

    Only consecutive point pairs lying entirely inside [start_m, end_m] count.

    Returns:
        (gain, loss) in meters, both non-negative.
    """
    distances = route.points["distanceM"].to_numpy(dtype=float)
    elevations = route.points["elevationM"].to_numpy(dtype=float)
    if len(distances) < 2:
        return 0.0, 0.0

    inside = (distances[:-1] >= start_m) & (distances[1:] <= end_m)
    diffs = np.diff(elevations)[inside]
    gain = float(diffs[diffs > 0].sum())
    loss = float(-diffs[diffs < 0].sum())
    return gain, loss


def grade_percent(prev: RoutePoint, nxt: RoutePoint) -> float:
    """Grade between two points in percent."""
    run = max(nxt.distance_m - prev.distance_m, GRADE_MIN_STEP_M)
    return (nxt.elevation_m - prev.elevation_m) / run * 100


def net_grade_percent(elev_gain_m: float, elev_loss_m: float, distance_m: float) -> float:
    """Net grade of a stretch in percent; 0 for a stretch without length."""
    if distance_m <= 0:
        return 0.0
    return (elev_gain_m - elev_loss_m) / distance_m * 100


def grades_percent(route: Route) -> np.ndarray:
    """Grade of every consecutive point pair in percent (length n - 1)."""
    distances = route.points["distanceM"].to_numpy(dtype=float)
    elevations = route.points["elevationM"].to_numpy(dtype=float)
    runs = np.maximum(np.diff(distances), GRADE_MIN_STEP_M)
    return np.diff(elevations) / runs * 100
