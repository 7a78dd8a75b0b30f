"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from haversine import Unit, haversine_vector

from config import EARTH_RADIUS_M


def distance(df: pd.DataFrame, lat_col: str = "lat", lon_col: str = "lon") -> pd.DataFrame:
    """Compute the great-circle distance between consecutive points in meters.

    The first row gets 0. The central angle comes from ``haversine`` in radians
    so the sphere radius stays ``EARTH_RADIUS_M``.
    """
    df = df.copy()
    if len(df) < 2:
        df["distance"] = 0.0
        return df
    coords = df[[lat_col, lon_col]].to_numpy(dtype=float)
    angles = haversine_vector(coords[:-1], coords[1:], unit=Unit.RADIANS)
    df["distance"] = np.concatenate([[0.0], np.asarray(angles, dtype=float) * EARTH_RADIUS_M])
    return df


def cumulated_distance(df: pd.DataFrame, distance_col: str = "distance") -> pd.DataFrame:
    """Compute cumulated distance from a per-row distance column."""
    df = df.copy()
    df["cumulated_distance"] = df[distance_col].cumsum()
    return df


def elevation(df: pd.DataFrame, elevation_col: str = "elevationM") -> pd.DataFrame:
    """Compute elevation deltas and cumulative gain/loss."""
    df = df.copy()
    df["elevation_difference"] = df[elevation_col].diff().fillna(0)
    df["elevation_gain"] = df["elevation_difference"].clip(lower=0).cumsum()
    df["elevation_loss"] = (-df["elevation_difference"]).clip(lower=0).cumsum()
    return df
