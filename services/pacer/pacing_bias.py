"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Negative/positive split shaping of segment paces.

Sign convention: a positive pacing bias gives a negative split (slower start,
faster finish); a negative bias gives a positive split.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from config import PACING_BIAS_SPAN
from services.pacer.pace_assignment import normalize_to_target


def apply_pacing_bias(
    segments_df: pd.DataFrame, pacing_bias: float, target_time_sec: float
) -> pd.DataFrame:
    """Re-weight paces along race progress, then re-normalize to the target.

    The factor at progress p is ``bias/100 * (p - 0.5) * 0.4``, so |bias| = 50
    changes the first and last paces by 10 % before normalization. Nothing
    changes for a zero bias or a single segment.
    """
    n = len(segments_df)
    if pacing_bias == 0 or n < 2:
        return segments_df.copy()

    df = segments_df.copy()
    progress = np.arange(n, dtype=float) / (n - 1)
    factors = (pacing_bias / 100) * (progress - 0.5) * PACING_BIAS_SPAN
    df["paceSecPerKm"] = df["paceSecPerKm"].to_numpy(dtype=float) * (1 - factors)
    df["timeSec"] = df["distanceM"] / 1000 * df["paceSecPerKm"]
    return normalize_to_target(df, target_time_sec)


def add_cumulative_time(segments_df: pd.DataFrame) -> pd.DataFrame:
    """Running sum of segment times at each segment end."""
    df = segments_df.copy()
    df["cumulativeTimeSec"] = df["timeSec"].cumsum()
    return df
