"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

from services.pacer.models import PacingConfiguration
from services.pacer_presenter import TABLE_COLUMNS, build_plan_table, build_summary_view_model
from utils.formatting import normalize_spaces, set_locale


def test_build_plan_table_flat_route(pacer_service, flat_10k):
    set_locale("fr_FR")
    plan = pacer_service.compute_pace_plan(flat_10k, PacingConfiguration.build("50:00"))
    table = build_plan_table(plan)

    assert list(table.columns) == TABLE_COLUMNS
    assert len(table) == 10
    first = table.iloc[0]
    assert first["#"] == "1"
    assert normalize_spaces(first["From"]) == "0,00 km"
    assert normalize_spaces(first["To"]) == "1,00 km"
    assert first["Pace"] == "5:00 /km"
    assert first["Split"] == "5:00"
    assert table.iloc[-1]["Elapsed"] == "0:50:00"


def test_build_summary_view_model(pacer_service, single_climb_5k):
    set_locale("fr_FR")
    plan = pacer_service.compute_pace_plan(single_climb_5k, PacingConfiguration.build("25:00"))
    summary = build_summary_view_model(single_climb_5k, plan)

    assert summary["name"] == "Test Route"
    assert normalize_spaces(summary["distance"]) == "5,00 km"
    assert normalize_spaces(summary["elevationGain"]) == "100 m"
    assert summary["totalTime"] == "0:25:00"
    assert summary["averagePace"] == "5:00 /km"
    assert summary["segments"] == "5"
    # the climbing kilometer is the slowest
    assert summary["slowestPace"] != summary["fastestPace"]
