"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Plain-dict/JSON exchange format for pace plans, handed to storage collaborators.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import pandas as pd

from services.pacer.models import PLAN_COLUMNS, PacePlan, PacingConfiguration, SegmentationPolicy


def configuration_to_dict(configuration: PacingConfiguration) -> Dict[str, Any]:
    return {
        "targetTimeSec": configuration.target_time_sec,
        "policy": configuration.policy.value,
        "pacingBias": configuration.pacing_bias,
        "climbEffort": configuration.climb_effort,
        "segmentLengthBias": configuration.segment_length_bias,
    }


def configuration_from_dict(data: Dict[str, Any]) -> PacingConfiguration:
    return PacingConfiguration.build(
        data["targetTimeSec"],
        policy=data.get("policy", SegmentationPolicy.FIXED_KILOMETER.value),
        pacing_bias=data.get("pacingBias", 0),
        climb_effort=data.get("climbEffort", 0),
        segment_length_bias=data.get("segmentLengthBias", 0),
    )


def plan_to_dict(
    plan: PacePlan, configuration: Optional[PacingConfiguration] = None
) -> Dict[str, Any]:
    """Convert a plan (and optionally its configuration) to JSON-safe types."""
    segments = [
        {col: (int(row[col]) if col == "segmentId" else float(row[col])) for col in PLAN_COLUMNS}
        for row in plan.segments.to_dict(orient="records")
    ]
    payload: Dict[str, Any] = {
        "segments": segments,
        "totalTimeSec": float(plan.total_time_sec),
        "averagePaceSecPerKm": float(plan.average_pace_sec_per_km),
    }
    if configuration is not None:
        payload["configuration"] = configuration_to_dict(configuration)
    return payload


def plan_from_dict(data: Dict[str, Any]) -> PacePlan:
    segments_df = pd.DataFrame(data.get("segments") or [], columns=PLAN_COLUMNS)
    return PacePlan(
        segments=segments_df,
        total_time_sec=float(data.get("totalTimeSec", 0.0)),
        average_pace_sec_per_km=float(data.get("averagePaceSecPerKm", 0.0)),
    )


def serialize_plan(
    plan: PacePlan, configuration: Optional[PacingConfiguration] = None
) -> str:
    return json.dumps(plan_to_dict(plan, configuration), ensure_ascii=False, separators=(",", ":"))


def deserialize_plan(s: Optional[str]) -> Optional[PacePlan]:
    if not s:
        return None
    return plan_from_dict(json.loads(s))
