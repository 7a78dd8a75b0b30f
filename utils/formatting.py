"""
Locale display helpers for distances and elevations.

Used for plan tables handed to the rendering layer; computations never go
through these strings.
"""

from __future__ import annotations

from typing import Optional

from babel import UnknownLocaleError, numbers

DEFAULT_LOCALE = "fr_FR"
LOCALE = DEFAULT_LOCALE

# Babel groups thousands with NBSP or NNBSP depending on the locale data
_SPACES = ("\u00A0", "\u202F")


def set_locale(locale_str: str = DEFAULT_LOCALE) -> None:
    """Switch the display locale; unknown locales fall back to French."""
    global LOCALE
    try:
        numbers.format_decimal(1.0, locale=locale_str)
    except (UnknownLocaleError, ValueError):
        LOCALE = DEFAULT_LOCALE
        return
    LOCALE = locale_str


def fmt_decimal(value: Optional[float], digits: Optional[int] = None) -> str:
    if value is None:
        return ""
    if digits is None:
        # locale default pattern, no trailing zeros
        return numbers.format_decimal(value, locale=LOCALE)
    pattern = "#,##0" + ("." + "0" * digits if digits > 0 else "")
    return numbers.format_decimal(value, format=pattern, locale=LOCALE)


def fmt_km(meters: Optional[float], digits: int = 2) -> str:
    """Format a distance given in meters as kilometers."""
    if meters is None:
        return ""
    return f"{fmt_decimal(meters / 1000, digits)}\u00A0km"


def fmt_m(meters: Optional[float]) -> str:
    if meters is None:
        return ""
    return f"{fmt_decimal(round(meters), 0)}\u00A0m"


def normalize_spaces(text: str) -> str:
    """Replace Babel's non-breaking spaces with plain spaces."""
    for space in _SPACES:
        text = text.replace(space, " ")
    return text
