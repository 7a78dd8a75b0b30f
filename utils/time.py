"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Race time and pace string helpers.
"""

from __future__ import annotations

import math

from services.pacer.errors import InvalidTimeFormatError


def parse_time_to_seconds(time_str: str) -> int:
    """Parse "H:MM:SS", "MM:SS" or a bare number of seconds.

    Raises:
        InvalidTimeFormatError: empty input, non-numeric or negative component,
            or more than three components.
    """
    if time_str is None:
        raise InvalidTimeFormatError("Time is required")
    parts = str(time_str).strip().split(":")
    if not 1 <= len(parts) <= 3:
        raise InvalidTimeFormatError(f"Invalid time format: {time_str!r}")

    values = []
    for part in parts:
        part = part.strip()
        if not part.isdecimal():
            raise InvalidTimeFormatError(f"Invalid time format: {time_str!r}")
        values.append(int(part))

    total = 0
    for value in values:
        total = total * 60 + value
    return total


def seconds_to_time(seconds: float, include_hours: bool = True) -> str:
    """Format seconds as "M:SS" (under one hour, hours omitted) or "H:MM:SS"."""
    seconds = max(0, int(round(float(seconds))))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    if h == 0 and not include_hours:
        return f"{m}:{s:02d}"
    return f"{h}:{m:02d}:{s:02d}"


def seconds_to_pace(sec_per_km: float) -> str:
    """Format a pace in seconds per km as "M:SS"."""
    if sec_per_km is None or not math.isfinite(sec_per_km):
        return ""
    sec_per_km = max(0, int(round(float(sec_per_km))))
    m = sec_per_km // 60
    s = sec_per_km % 60
    return f"{m}:{s:02d}"

