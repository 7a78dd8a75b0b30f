"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import json

import pandas as pd
import pytest

from services.pacer.models import PLAN_COLUMNS, PacingConfiguration, SegmentationPolicy
from services.serialization import (
    configuration_from_dict,
    configuration_to_dict,
    deserialize_plan,
    plan_to_dict,
    serialize_plan,
)


def test_plan_json_round_trip(pacer_service, single_climb_5k):
    configuration = PacingConfiguration.build("25:00", policy="km", pacing_bias=20)
    plan = pacer_service.compute_pace_plan(single_climb_5k, configuration)

    payload = json.loads(serialize_plan(plan, configuration))
    assert payload["configuration"]["policy"] == "km"
    assert payload["configuration"]["pacingBias"] == 20
    assert set(payload["segments"][0]) == set(PLAN_COLUMNS)

    restored = deserialize_plan(serialize_plan(plan))
    assert restored.total_time_sec == pytest.approx(1500.0)
    assert restored.average_pace_sec_per_km == pytest.approx(plan.average_pace_sec_per_km)
    pd.testing.assert_frame_equal(restored.segments, plan.segments, check_dtype=False)


def test_configuration_round_trip():
    configuration = PacingConfiguration.build(
        "1:30:00", policy=SegmentationPolicy.GRADE_ADAPTIVE, pacing_bias=-10, climb_effort=30, segment_length_bias=5
    )
    data = configuration_to_dict(configuration)
    assert data["targetTimeSec"] == 5400
    assert configuration_from_dict(data) == configuration


def test_deserialize_empty():
    assert deserialize_plan(None) is None
    assert deserialize_plan("") is None
    assert plan_to_dict(deserialize_plan('{"segments":[]}'))["segments"] == []
