"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Grade-aware pace assignment for race segments.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from streamlit.logger import get_logger

from config import CLIMB_SEC_PER_KM_PER_PCT, DESCENT_SEC_PER_KM_PER_PCT, MIN_PACE_FRACTION_OF_BASE
from services.pacer.errors import DegenerateRouteError
from utils.elevation import net_grade_percent

logger = get_logger(__name__)


def compute_base_pace(target_time_sec: float, total_distance_m: float) -> float:
    """Even pace (s/km) that meets the target on a perfectly flat course.

    Raises:
        DegenerateRouteError: if the distance is not positive
    """
    if not total_distance_m > 0:
        raise DegenerateRouteError(f"Route distance must be positive, got {total_distance_m}")
    return target_time_sec / (total_distance_m / 1000)


def compute_pace_adjustment(
    elev_gain_m: float, elev_loss_m: float, distance_m: float, climb_effort: float
) -> float:
    """Pace adjustment in s/km from the segment's net grade.

    Climbs slow the pace by 12 s/km per percent, damped by a higher climb
    effort; descents speed it up by 6 s/km per percent, amplified by it.
    """
    effort_factor = 1 + climb_effort / 100
    grade = net_grade_percent(elev_gain_m, elev_loss_m, distance_m)
    if grade > 0:
        return grade * CLIMB_SEC_PER_KM_PER_PCT / effort_factor
    if grade < 0:
        return grade * DESCENT_SEC_PER_KM_PER_PCT * effort_factor
    return 0.0


def assign_grade_paces(
    segments_df: pd.DataFrame, base_pace_sec_per_km: float, climb_effort: float
) -> pd.DataFrame:
    """Add paceSecPerKm and timeSec columns from the base pace and grade.

    Paces never drop below a fraction of the base pace, so steep descents
    keep a positive time.
    """
    df = segments_df.copy()
    adjustments = [
        compute_pace_adjustment(gain, loss, dist, climb_effort)
        for gain, loss, dist in zip(df["elevGainM"], df["elevLossM"], df["distanceM"])
    ]
    paces = base_pace_sec_per_km + np.asarray(adjustments, dtype=float)
    df["paceSecPerKm"] = np.maximum(paces, base_pace_sec_per_km * MIN_PACE_FRACTION_OF_BASE)
    df["timeSec"] = df["distanceM"] / 1000 * df["paceSecPerKm"]
    return df


def normalize_to_target(segments_df: pd.DataFrame, target_time_sec: float) -> pd.DataFrame:
    """Scale every pace and time so that the times sum to the target.

    Raises:
        DegenerateRouteError: if the segment times do not add up to a positive total
    """
    df = segments_df.copy()
    total = float(df["timeSec"].sum())
    if not total > 0:
        logger.warning("Cannot normalize segments with total time %.3f s", total)
        raise DegenerateRouteError(f"Segment times sum to {total} s, cannot scale to the target")
    scale = target_time_sec / total
    df["paceSecPerKm"] = df["paceSecPerKm"] * scale
    df["timeSec"] = df["timeSec"] * scale
    return df
