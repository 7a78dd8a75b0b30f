"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Union

import numpy as np
import pandas as pd
from streamlit.logger import get_logger

from config import (
    VIRTUAL_ROUTE_ELEVATION_M,
    VIRTUAL_ROUTE_MIN_STEPS,
    VIRTUAL_ROUTE_ORIGIN,
    VIRTUAL_ROUTE_SPAN_DEG,
    VIRTUAL_ROUTE_STEPS_PER_KM,
)
from services.pacer.errors import DegenerateRouteError, EmptyTrackError
from services.pacer.models import POINT_COLUMNS, Route
from utils import timeseries_preprocessing as ts_pre

logger = get_logger(__name__)

RawPoints = Union[pd.DataFrame, Iterable[Any]]


class PacerPreprocessor:
    """Turn raw GPS points into distance-indexed routes for race pacing."""

    def parse_track(self, raw_points: RawPoints, name: str = "Route") -> Route:
        """Build a route from ordered raw points.

        Distance is referenced from the first point and accumulated along the
        great-circle distance between consecutive points. Point order is kept
        as given.

        Args:
            raw_points: DataFrame with lat, lon and optional elevationM, or an
                iterable of (lat, lon[, elevation]) tuples or dicts.
            name: Route name

        Returns:
            Route with cumulative distances and total gain/loss

        Raises:
            EmptyTrackError: if no usable point remains
        """
        df = self._to_points_frame(raw_points)
        if df.empty:
            logger.warning("No usable track points for route %s", name)
            raise EmptyTrackError("Track contains no usable points")

        df = ts_pre.distance(df, lat_col="lat", lon_col="lon")
        df = ts_pre.cumulated_distance(df)
        df = df.rename(columns={"cumulated_distance": "distanceM"})
        return self.build_route(name, df[POINT_COLUMNS])

    def build_route(self, name: str, points_df: pd.DataFrame, is_virtual: bool = False) -> Route:
        """Build a route from points whose cumulative distance is already known.

        Args:
            name: Route name
            points_df: DataFrame with lat, lon, elevationM, distanceM

        Raises:
            EmptyTrackError: if points_df is empty
            DegenerateRouteError: if distanceM decreases along the route
        """
        if points_df is None or points_df.empty:
            raise EmptyTrackError("Track contains no usable points")

        df = points_df.copy().reset_index(drop=True)
        if "elevationM" not in df.columns:
            df["elevationM"] = 0.0
        df["elevationM"] = pd.to_numeric(df["elevationM"], errors="coerce").fillna(0.0)
        df = df[POINT_COLUMNS].astype(float)

        if (df["distanceM"].diff().dropna() < 0).any():
            raise DegenerateRouteError("Cumulative distance must not decrease")

        df = ts_pre.elevation(df, elevation_col="elevationM")
        gain = float(df["elevation_gain"].iloc[-1])
        loss = float(df["elevation_loss"].iloc[-1])
        total = float(df["distanceM"].iloc[-1])

        logger.debug(
            "Built route %s: %d points, %.1f m, D+ %.0f m, D- %.0f m",
            name,
            len(df),
            total,
            gain,
            loss,
        )
        return Route(
            name=name,
            points=df[POINT_COLUMNS],
            total_distance_m=total,
            total_elevation_gain_m=gain,
            total_elevation_loss_m=loss,
            is_virtual=is_virtual,
        )

    def create_virtual_route(self, distance_km: float, name: Optional[str] = None) -> Route:
        """Create a flat, evenly sampled route of a given distance.

        Used when no GPS track is available (e.g. planning a road 10K).
        """
        if not distance_km or distance_km <= 0:
            raise DegenerateRouteError(f"Virtual route distance must be positive, got {distance_km}")

        steps = max(VIRTUAL_ROUTE_MIN_STEPS, int(math.floor(distance_km * VIRTUAL_ROUTE_STEPS_PER_KM)))
        progress = np.linspace(0.0, 1.0, steps + 1)
        lat0, lon0 = VIRTUAL_ROUTE_ORIGIN
        df = pd.DataFrame(
            {
                "lat": lat0 + progress * VIRTUAL_ROUTE_SPAN_DEG,
                "lon": lon0 + progress * VIRTUAL_ROUTE_SPAN_DEG,
                "elevationM": VIRTUAL_ROUTE_ELEVATION_M,
                "distanceM": progress * distance_km * 1000,
            }
        )
        label = name or f"Route {distance_km:g}K"
        return self.build_route(label, df, is_virtual=True)

    def _to_points_frame(self, raw_points: RawPoints) -> pd.DataFrame:
        """Normalise raw points into a lat/lon/elevationM DataFrame."""
        if raw_points is None:
            return pd.DataFrame(columns=["lat", "lon", "elevationM"])

        if isinstance(raw_points, pd.DataFrame):
            df = raw_points.copy()
        else:
            rows = []
            for point in raw_points:
                if isinstance(point, dict):
                    rows.append(
                        {
                            "lat": point.get("lat"),
                            "lon": point.get("lon", point.get("lng")),
                            "elevationM": point.get("elevationM", point.get("elevation")),
                        }
                    )
                else:
                    values = list(point)
                    rows.append(
                        {
                            "lat": values[0] if len(values) > 0 else None,
                            "lon": values[1] if len(values) > 1 else None,
                            "elevationM": values[2] if len(values) > 2 else None,
                        }
                    )
            df = pd.DataFrame(rows, columns=["lat", "lon", "elevationM"])

        if "lat" not in df.columns or "lon" not in df.columns:
            logger.warning("Missing lat/lon columns for preprocessing")
            return pd.DataFrame(columns=["lat", "lon", "elevationM"])

        if "elevationM" not in df.columns:
            df["elevationM"] = 0.0

        df["lat"] = pd.to_numeric(df["lat"], errors="coerce")
        df["lon"] = pd.to_numeric(df["lon"], errors="coerce")
        df["elevationM"] = pd.to_numeric(df["elevationM"], errors="coerce").fillna(0.0)

        usable = df["lat"].notna() & df["lon"].notna()
        dropped = int((~usable).sum())
        if dropped:
            logger.debug("Dropped %d points without coordinates", dropped)
        return df.loc[usable, ["lat", "lon", "elevationM"]].reset_index(drop=True)
