"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Position lookup along a route by cumulative distance.
"""

from __future__ import annotations

import numpy as np

from services.pacer.models import Route, RoutePoint


def point_at_distance(route: Route, distance_m: float) -> RoutePoint:
    """Return the point located ``distance_m`` meters from the start.

    Latitude, longitude and elevation are linearly interpolated inside the
    bracketing pair of points. Distances past the last point return the last
    point unchanged; a zero-length bracket returns its first point.
    """
    distances = route.points["distanceM"].to_numpy(dtype=float)
    last = len(distances) - 1

    if distance_m >= distances[last]:
        return route.point(last)
    if distance_m <= distances[0]:
        return route.point(0)

    # distances[i] < d <= distances[i + 1]
    i = int(np.searchsorted(distances, distance_m, side="left")) - 1
    i = min(max(i, 0), last - 1)

    start = route.point(i)
    end = route.point(i + 1)
    span = end.distance_m - start.distance_m
    if span <= 0:
        return start

    ratio = (distance_m - start.distance_m) / span
    return RoutePoint(
        lat=start.lat + (end.lat - start.lat) * ratio,
        lon=start.lon + (end.lon - start.lon) * ratio,
        elevation_m=start.elevation_m + (end.elevation_m - start.elevation_m) * ratio,
        distance_m=float(distance_m),
    )
