"""
Configuration loading utilities.

Loads environment variables from `.env` into pacing defaults and the display
locale.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from dotenv import find_dotenv, load_dotenv
from streamlit.logger import get_logger

from config import BIAS_MAX, BIAS_MIN
from services.pacer.errors import InvalidConfigurationError
from services.pacer.models import PacingConfiguration, SegmentationPolicy
from utils.coercion import clamp_int, safe_int
from utils.formatting import set_locale

logger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    default_policy: SegmentationPolicy
    default_pacing_bias: int
    default_climb_effort: int
    default_segment_length_bias: int
    locale: str

    def default_configuration(self, target_time: Union[str, int, float]) -> PacingConfiguration:
        """Pacing configuration for a target time using the configured defaults."""
        return PacingConfiguration.build(
            target_time,
            policy=self.default_policy,
            pacing_bias=self.default_pacing_bias,
            climb_effort=self.default_climb_effort,
            segment_length_bias=self.default_segment_length_bias,
        )


def _bias_from_env(name: str) -> int:
    return clamp_int(safe_int(os.getenv(name), 0), BIAS_MIN, BIAS_MAX)


def load_config() -> Config:
    """Load pacing defaults from `.env` and the environment; apply the locale."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    policy_str = os.getenv("PACER_DEFAULT_POLICY", SegmentationPolicy.FIXED_KILOMETER.value)
    try:
        default_policy = SegmentationPolicy.parse(policy_str)
    except InvalidConfigurationError:
        logger.warning("Unknown PACER_DEFAULT_POLICY %r, using km", policy_str)
        default_policy = SegmentationPolicy.FIXED_KILOMETER

    locale = os.getenv("PACER_LOCALE", "fr_FR")
    logger.debug("PACER_DEFAULT_POLICY: %s, PACER_LOCALE: %s", default_policy.value, locale)

    set_locale(locale)

    return Config(
        default_policy=default_policy,
        default_pacing_bias=_bias_from_env("PACER_DEFAULT_PACING_BIAS"),
        default_climb_effort=_bias_from_env("PACER_DEFAULT_CLIMB_EFFORT"),
        default_segment_length_bias=_bias_from_env("PACER_DEFAULT_SEGMENT_LENGTH_BIAS"),
        locale=locale,
    )
