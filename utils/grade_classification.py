"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import pandas as pd

from config import GRADE_CLASS_THRESHOLD_PCT

CLIMB = "climb"
DESCENT = "descent"
FLAT = "flat"


def classify_grade_3cat(grade_pct: float) -> str:
    """Classify grade for adaptive segmentation (3 categories).

    Args:
        grade_pct: Grade value in percent.

    Returns:
        One of: climb, descent, flat.
    """
    if pd.isna(grade_pct):
        return FLAT
    if grade_pct > GRADE_CLASS_THRESHOLD_PCT:
        return CLIMB
    if grade_pct < -GRADE_CLASS_THRESHOLD_PCT:
        return DESCENT
    return FLAT
