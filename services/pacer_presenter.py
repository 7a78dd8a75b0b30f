"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Pure helpers to build pace plan view models for the rendering layer.
"""

from __future__ import annotations

from typing import Dict

import pandas as pd

from services.pacer.models import PacePlan, Route
from utils.formatting import fmt_km, fmt_m
from utils.time import seconds_to_pace, seconds_to_time

TABLE_COLUMNS = ["#", "From", "To", "D+", "D-", "Pace", "Split", "Elapsed"]


def build_plan_table(plan: PacePlan) -> pd.DataFrame:
    """One display row per segment, all values as strings."""
    rows = []
    for seg in plan.segments.to_dict(orient="records"):
        rows.append(
            {
                "#": str(int(seg["segmentId"]) + 1),
                "From": fmt_km(seg["startM"]),
                "To": fmt_km(seg["endM"]),
                "D+": fmt_m(seg["elevGainM"]),
                "D-": fmt_m(seg["elevLossM"]),
                "Pace": f"{seconds_to_pace(seg['paceSecPerKm'])} /km",
                "Split": seconds_to_time(seg["timeSec"], include_hours=False),
                "Elapsed": seconds_to_time(seg["cumulativeTimeSec"]),
            }
        )
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def build_summary_view_model(route: Route, plan: PacePlan) -> Dict[str, str]:
    segments_df = plan.segments
    fastest = float(segments_df["paceSecPerKm"].min()) if not segments_df.empty else 0.0
    slowest = float(segments_df["paceSecPerKm"].max()) if not segments_df.empty else 0.0
    return {
        "name": route.name,
        "distance": fmt_km(route.total_distance_m),
        "elevationGain": fmt_m(route.total_elevation_gain_m),
        "elevationLoss": fmt_m(route.total_elevation_loss_m),
        "totalTime": seconds_to_time(plan.total_time_sec),
        "averagePace": f"{seconds_to_pace(plan.average_pace_sec_per_km)} /km",
        "fastestPace": f"{seconds_to_pace(fastest)} /km",
        "slowestPace": f"{seconds_to_pace(slowest)} /km",
        "segments": str(len(segments_df)),
    }
