"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Lenient conversions for values read from files and the environment.
"""

from __future__ import annotations

import math
from typing import Any, Optional


def safe_int(value: object, default: int = 0) -> int:
    """Convert to int via float ("12.0" -> 12), or return ``default``."""
    try:
        if value in (None, "", "NaN"):
            return default
        return int(float(value))
    except (TypeError, ValueError):
        return default


def safe_float_optional(value: object) -> Optional[float]:
    """Convert to float, returning None for missing, NaN or unparsable values.

    Args:
        value: Attribute text, cell value or number

    Returns:
        Optional[float]: Converted value or None
    """
    try:
        if value in (None, "", "NaN"):
            return None
        result = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(result) else result


def clamp_int(value: Any, lower: int, upper: int) -> int:
    """Round a numeric value and clamp it to [lower, upper].

    Raises:
        ValueError, TypeError: if the value is not numeric.
    """
    number = float(value)
    if math.isnan(number):
        raise ValueError("Cannot clamp NaN")
    return max(lower, min(upper, int(round(number))))
