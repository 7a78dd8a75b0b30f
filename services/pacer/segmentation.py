"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
from streamlit.logger import get_logger

from config import KILOMETER_SEGMENT_M, MILE_SEGMENT_M, SEGMENT_LENGTH_ANCHORS
from services.pacer.errors import ZeroSegmentError
from services.pacer.models import SEGMENT_COLUMNS, Route, SegmentationPolicy
from utils.elevation import elevation_delta, grades_percent
from utils.grade_classification import classify_grade_3cat
from utils.interpolation import point_at_distance

logger = get_logger(__name__)


def min_segment_length_m(segment_length_bias: float) -> float:
    """Minimum grade-adaptive segment length for a bias in [-50, 50].

    Piecewise-linear between -50 -> 200 m, 0 -> 500 m and +50 -> 2000 m.
    """
    anchors = sorted(SEGMENT_LENGTH_ANCHORS.items())
    xs = [float(k) for k, _ in anchors]
    ys = [float(v) for _, v in anchors]
    return float(np.interp(float(segment_length_bias), xs, ys))


class SegmentationService:
    """Partition a route into contiguous pacing segments."""

    def segment_route(
        self,
        route: Route,
        policy: SegmentationPolicy = SegmentationPolicy.FIXED_KILOMETER,
        segment_length_bias: int = 0,
    ) -> pd.DataFrame:
        """Segment a route with the given policy.

        Args:
            route: Route to segment
            policy: fixed kilometer, fixed mile or grade-adaptive
            segment_length_bias: Only used by the grade-adaptive policy

        Returns:
            DataFrame with one row per segment (see SEGMENT_COLUMNS), ordered
            and contiguous from 0 to route.total_distance_m
        """
        policy = SegmentationPolicy.parse(policy)
        if policy is SegmentationPolicy.FIXED_MILE:
            return self.segment_fixed(route, MILE_SEGMENT_M)
        if policy is SegmentationPolicy.GRADE_ADAPTIVE:
            try:
                return self.segment_by_grade(route, min_segment_length_m(segment_length_bias))
            except ZeroSegmentError:
                logger.debug("Grade-adaptive segmentation empty for %s, using 1 km segments", route.name)
                return self.segment_fixed(route, KILOMETER_SEGMENT_M)
        return self.segment_fixed(route, KILOMETER_SEGMENT_M)

    def segment_fixed(self, route: Route, segment_length_m: float) -> pd.DataFrame:
        """Cut the route every ``segment_length_m`` meters; the last one may be shorter."""
        total = route.total_distance_m
        count = int(math.ceil(total / segment_length_m)) if total > 0 else 0

        bounds = []
        for i in range(count):
            start_m = i * segment_length_m
            end_m = min((i + 1) * segment_length_m, total)
            if end_m > start_m:
                bounds.append((start_m, end_m))
        return self._build_segments(route, bounds)

    def segment_by_grade(self, route: Route, min_length_m: float) -> pd.DataFrame:
        """Cut the route where grade class changes, at least ``min_length_m`` apart.

        Each consecutive point pair is classified climb/descent/flat. A cut is
        placed at the point where the class changes once the stretch since the
        previous cut reaches ``min_length_m``; shorter alternations stay merged.
        The remaining stretch always closes the route.

        Raises:
            ZeroSegmentError: if no segment could be produced
        """
        distances = route.points["distanceM"].to_numpy(dtype=float)
        total = route.total_distance_m
        if len(distances) < 2 or total <= 0:
            raise ZeroSegmentError(f"Route {route.name} has no length to segment")

        categories = [classify_grade_3cat(g) for g in grades_percent(route)]

        bounds = []
        cut_m = 0.0
        for i in range(1, len(categories)):
            if categories[i] == categories[i - 1]:
                continue
            # Pair i runs from point i to i + 1, so the class changes at point i
            change_m = float(distances[i])
            if change_m - cut_m >= min_length_m:
                bounds.append((cut_m, change_m))
                cut_m = change_m

        if total > cut_m:
            bounds.append((cut_m, total))

        if not bounds:
            raise ZeroSegmentError(f"No grade segment found for route {route.name}")

        logger.debug(
            "Grade segmentation of %s: %d segments (min %.0f m)", route.name, len(bounds), min_length_m
        )
        return self._build_segments(route, bounds)

    def _build_segments(self, route: Route, bounds: list[tuple[float, float]]) -> pd.DataFrame:
        """Interpolate endpoints and sum elevation for each (start, end) pair."""
        rows = []
        for idx, (start_m, end_m) in enumerate(bounds):
            start_point = point_at_distance(route, start_m)
            end_point = point_at_distance(route, end_m)
            gain, loss = elevation_delta(route, start_m, end_m)
            rows.append(
                {
                    "segmentId": idx,
                    "startM": start_m,
                    "endM": end_m,
                    "distanceM": end_m - start_m,
                    "elevGainM": gain,
                    "elevLossM": loss,
                    "startLat": start_point.lat,
                    "startLon": start_point.lon,
                    "startElevationM": start_point.elevation_m,
                    "endLat": end_point.lat,
                    "endLon": end_point.lon,
                    "endElevationM": end_point.elevation_m,
                }
            )
        return pd.DataFrame(rows, columns=SEGMENT_COLUMNS)
