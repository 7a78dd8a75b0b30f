"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from services.pacer_service import PacerService as PacerService
    from services.pacer_service import compute_pace_plan as compute_pace_plan


def __getattr__(name: str) -> object:
    if name in ("PacerService", "compute_pace_plan"):
        from services import pacer_service

        return getattr(pacer_service, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["PacerService", "compute_pace_plan"]
