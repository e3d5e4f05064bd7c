# lifeatlas/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_MONTHS = 960  # 80 years
DEFAULT_DEBT_MAX_MONTHS = 600
DEFAULT_RED_ZONE_THRESHOLD = 70
DEFAULT_MAX_AGE = 110
DEFAULT_DOWNSAMPLE_POINTS = 200

UNCERTAINTY_SPREAD_PER_MONTH = 500.0
SAFE_WITHDRAWAL_RATE = 0.04
PAID_OFF_EPSILON = 0.01

LOG_LEVEL_ENV = "LIFEATLAS_LOG_LEVEL"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


def log_level_from_env(default: int = logging.WARNING) -> int:
    raw = str(os.getenv(LOG_LEVEL_ENV, "")).strip().upper()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class EngineSettings:
    """Caller-side defaults, passed explicitly into each engine call."""

    months: int = DEFAULT_MONTHS
    debt_max_months: int = DEFAULT_DEBT_MAX_MONTHS
    red_zone_threshold: int = DEFAULT_RED_ZONE_THRESHOLD
    max_age: int = DEFAULT_MAX_AGE
    downsample_points: int = DEFAULT_DOWNSAMPLE_POINTS
    log_level: int = logging.WARNING


def settings_from_env() -> EngineSettings:
    """Build settings from LIFEATLAS_* environment variables.

    Unset or unparseable values keep the defaults above.
    """
    return EngineSettings(
        months=_env_int("LIFEATLAS_MONTHS", DEFAULT_MONTHS),
        debt_max_months=_env_int("LIFEATLAS_DEBT_MAX_MONTHS", DEFAULT_DEBT_MAX_MONTHS),
        red_zone_threshold=_env_int("LIFEATLAS_RED_ZONE_THRESHOLD", DEFAULT_RED_ZONE_THRESHOLD),
        max_age=_env_int("LIFEATLAS_MAX_AGE", DEFAULT_MAX_AGE),
        downsample_points=_env_int("LIFEATLAS_DOWNSAMPLE_POINTS", DEFAULT_DOWNSAMPLE_POINTS),
        log_level=log_level_from_env(),
    )
