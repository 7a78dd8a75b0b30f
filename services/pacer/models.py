"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Value objects for race pacing: route, points, configuration and pace plan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

import pandas as pd

from config import BIAS_MAX, BIAS_MIN
from services.pacer.errors import InvalidConfigurationError
from utils.coercion import clamp_int
from utils.time import parse_time_to_seconds

POINT_COLUMNS = ["lat", "lon", "elevationM", "distanceM"]

SEGMENT_COLUMNS = [
    "segmentId",
    "startM",
    "endM",
    "distanceM",
    "elevGainM",
    "elevLossM",
    "startLat",
    "startLon",
    "startElevationM",
    "endLat",
    "endLon",
    "endElevationM",
]

PLAN_COLUMNS = SEGMENT_COLUMNS + ["paceSecPerKm", "timeSec", "cumulativeTimeSec"]


class SegmentationPolicy(str, Enum):
    FIXED_KILOMETER = "km"
    FIXED_MILE = "mile"
    GRADE_ADAPTIVE = "elevation"

    @classmethod
    def parse(cls, value: Union["SegmentationPolicy", str]) -> "SegmentationPolicy":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for policy in cls:
            if key in (policy.value, policy.name.lower()):
                return policy
        raise InvalidConfigurationError(f"Unknown segmentation policy: {value!r}")


@dataclass(frozen=True)
class RoutePoint:
    lat: float
    lon: float
    elevation_m: float
    distance_m: float


@dataclass(frozen=True)
class Route:
    """Distance-indexed polyline with elevation.

    ``points`` holds one row per GPS point with columns lat, lon, elevationM and
    distanceM (cumulative meters from start, non-decreasing).
    """

    name: str
    points: pd.DataFrame = field(repr=False)
    total_distance_m: float
    total_elevation_gain_m: float
    total_elevation_loss_m: float
    is_virtual: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def point(self, index: int) -> RoutePoint:
        row = self.points.iloc[index]
        return RoutePoint(
            lat=float(row["lat"]),
            lon=float(row["lon"]),
            elevation_m=float(row["elevationM"]),
            distance_m=float(row["distanceM"]),
        )


@dataclass(frozen=True)
class PacingConfiguration:
    """Validated pacing inputs. Biases are clamped to [-50, 50]."""

    target_time_sec: float
    policy: SegmentationPolicy = SegmentationPolicy.FIXED_KILOMETER
    pacing_bias: int = 0
    climb_effort: int = 0
    segment_length_bias: int = 0

    @classmethod
    def build(
        cls,
        target_time: Union[str, int, float],
        policy: Union[SegmentationPolicy, str] = SegmentationPolicy.FIXED_KILOMETER,
        pacing_bias: int = 0,
        climb_effort: int = 0,
        segment_length_bias: int = 0,
    ) -> "PacingConfiguration":
        if isinstance(target_time, str):
            target_sec = float(parse_time_to_seconds(target_time))
        else:
            target_sec = float(target_time)
        if not target_sec > 0:
            raise InvalidConfigurationError(f"Target time must be positive, got {target_time!r}")

        return cls(
            target_time_sec=target_sec,
            policy=SegmentationPolicy.parse(policy),
            pacing_bias=clamp_int(pacing_bias, BIAS_MIN, BIAS_MAX),
            climb_effort=clamp_int(climb_effort, BIAS_MIN, BIAS_MAX),
            segment_length_bias=clamp_int(segment_length_bias, BIAS_MIN, BIAS_MAX),
        )


@dataclass(frozen=True)
class PacePlan:
    segments: pd.DataFrame = field(repr=False)
    total_time_sec: float
    average_pace_sec_per_km: float

    def __len__(self) -> int:
        return len(self.segments)
