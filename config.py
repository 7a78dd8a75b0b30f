"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

EARTH_RADIUS_M = 6_371_000.0

# Fixed-length segmentation policies (meters)
KILOMETER_SEGMENT_M = 1000.0
MILE_SEGMENT_M = 1609.34

# Grade classification threshold (percent), not user-configurable
GRADE_CLASS_THRESHOLD_PCT = 2.0
GRADE_MIN_STEP_M = 1e-6

# Minimum grade-adaptive segment length (meters) keyed by segment length bias
SEGMENT_LENGTH_ANCHORS = {-50: 200.0, 0: 500.0, 50: 2000.0}

# Pace adjustment per percent of net grade (seconds per km)
CLIMB_SEC_PER_KM_PER_PCT = 12.0
DESCENT_SEC_PER_KM_PER_PCT = 6.0

# Fastest pace a descent can give, as a fraction of the base pace
MIN_PACE_FRACTION_OF_BASE = 0.2

# Maximum relative pace distortion at the race extremes for |bias| = 100
PACING_BIAS_SPAN = 0.4

BIAS_MIN = -50
BIAS_MAX = 50

# Virtual (distance-only) routes
VIRTUAL_ROUTE_MIN_STEPS = 100
VIRTUAL_ROUTE_STEPS_PER_KM = 10
VIRTUAL_ROUTE_ELEVATION_M = 10.0
VIRTUAL_ROUTE_ORIGIN = (39.4699, -0.3763)
VIRTUAL_ROUTE_SPAN_DEG = 0.01
