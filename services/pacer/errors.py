"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Exceptions raised by the race pacing pipeline.
"""

from __future__ import annotations


class PacerError(ValueError):
    """Base class for pacing errors."""


class EmptyTrackError(PacerError):
    """The track yields no usable point."""


class TrackParseError(PacerError):
    """GPX/TCX content could not be read."""


class InvalidTimeFormatError(PacerError):
    """A target time string is not H:MM:SS, MM:SS or plain seconds."""


class DegenerateRouteError(PacerError):
    """The route has no positive length, so no pace can be derived."""


class ZeroSegmentError(PacerError):
    """Grade-adaptive segmentation produced no segment."""


class InvalidConfigurationError(PacerError):
    """Pacing configuration cannot be used (unknown policy, bad target)."""
