"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Pacer service for race course segmentation and pacing calculations.

Builds a segment-by-segment pace plan from a route and a target time. The
pipeline is pure: the same route and configuration always give the same plan.
"""

from __future__ import annotations

from typing import Optional, Union

import pandas as pd
from streamlit.logger import get_logger

from services.pacer.errors import DegenerateRouteError
from services.pacer.models import (
    PLAN_COLUMNS,
    PacePlan,
    PacingConfiguration,
    Route,
    SegmentationPolicy,
)
from services.pacer.pace_assignment import (
    assign_grade_paces,
    compute_base_pace,
    normalize_to_target,
)
from services.pacer.pacing_bias import add_cumulative_time, apply_pacing_bias
from services.pacer.preprocessing import PacerPreprocessor, RawPoints
from services.pacer.segmentation import SegmentationService

logger = get_logger(__name__)


class PacerService:
    """Service for race course segmentation and pacing."""

    def __init__(self) -> None:
        self.preprocessor = PacerPreprocessor()
        self.segmentation = SegmentationService()

    def parse_track(self, raw_points: RawPoints, name: str = "Route") -> Route:
        return self.preprocessor.parse_track(raw_points, name=name)

    def create_virtual_route(self, distance_km: float, name: Optional[str] = None) -> Route:
        return self.preprocessor.create_virtual_route(distance_km, name=name)

    def segment_route(
        self,
        route: Route,
        policy: Union[SegmentationPolicy, str] = SegmentationPolicy.FIXED_KILOMETER,
        segment_length_bias: int = 0,
    ) -> pd.DataFrame:
        return self.segmentation.segment_route(route, policy, segment_length_bias)

    def compute_pace_plan(self, route: Route, configuration: PacingConfiguration) -> PacePlan:
        """Compute the pace plan of a route for a configuration.

        Steps: segmentation, grade-adjusted paces normalized to the target,
        pacing bias re-normalized to the target, cumulative times.

        Raises:
            DegenerateRouteError: if the route has no positive length
        """
        if len(route) < 2 or not route.total_distance_m > 0:
            raise DegenerateRouteError(
                f"Route {route.name!r} has no length ({len(route)} points, {route.total_distance_m} m)"
            )

        target = configuration.target_time_sec
        base_pace = compute_base_pace(target, route.total_distance_m)

        segments_df = self.segment_route(route, configuration.policy, configuration.segment_length_bias)
        segments_df = assign_grade_paces(segments_df, base_pace, configuration.climb_effort)
        segments_df = normalize_to_target(segments_df, target)
        segments_df = apply_pacing_bias(segments_df, configuration.pacing_bias, target)
        segments_df = add_cumulative_time(segments_df)

        total_time = float(segments_df["timeSec"].sum())
        average_pace = total_time / (route.total_distance_m / 1000)
        logger.debug(
            "Pace plan for %s: %d segments, base %.1f s/km, avg %.1f s/km",
            route.name,
            len(segments_df),
            base_pace,
            average_pace,
        )
        return PacePlan(
            segments=segments_df[PLAN_COLUMNS].reset_index(drop=True),
            total_time_sec=total_time,
            average_pace_sec_per_km=average_pace,
        )

    def aggregate_summary(self, plan: PacePlan) -> dict:
        """Aggregate totals from a plan's segments.

        Returns:
            Dictionary with totals and pace range
        """
        segments_df = plan.segments
        if segments_df.empty:
            return {
                "segmentCount": 0,
                "distanceM": 0.0,
                "elevGainM": 0.0,
                "elevLossM": 0.0,
                "timeSec": 0.0,
                "avgPaceSecPerKm": 0.0,
                "minPaceSecPerKm": 0.0,
                "maxPaceSecPerKm": 0.0,
            }

        return {
            "segmentCount": int(len(segments_df)),
            "distanceM": float(segments_df["distanceM"].sum()),
            "elevGainM": float(segments_df["elevGainM"].sum()),
            "elevLossM": float(segments_df["elevLossM"].sum()),
            "timeSec": float(plan.total_time_sec),
            "avgPaceSecPerKm": float(plan.average_pace_sec_per_km),
            "minPaceSecPerKm": float(segments_df["paceSecPerKm"].min()),
            "maxPaceSecPerKm": float(segments_df["paceSecPerKm"].max()),
        }


def compute_pace_plan(
    route: Route,
    target_time: Union[str, int, float],
    policy: Union[SegmentationPolicy, str],
    pacing_bias: int,
    climb_effort: int,
    segment_length_bias: int = 0,
) -> PacePlan:
    """Compute a pace plan from plain arguments.

    ``target_time`` is "H:MM:SS", "MM:SS" or seconds. Biases are clamped to
    [-50, 50].
    """
    configuration = PacingConfiguration.build(
        target_time,
        policy=policy,
        pacing_bias=pacing_bias,
        climb_effort=climb_effort,
        segment_length_bias=segment_length_bias,
    )
    return PacerService().compute_pace_plan(route, configuration)
