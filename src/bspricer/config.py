"""Runtime configuration derived from environment variables."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CURVE_RANGE = 50.0
DEFAULT_CURVE_POINTS = 100
DEFAULT_PARITY_TOLERANCE = 0.01


def _get_env(name: str, *, default: str | None = None) -> str | None:
    """Return a trimmed environment variable value, ``default`` if unset or blank."""

    value = os.getenv(name)
    if value is None:
        return default
    trimmed = value.strip()
    return trimmed or default


def _get_float(name: str, default: float) -> float:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {name} must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise RuntimeError(f"Environment variable {name} must be positive, got {raw!r}")
    return value


def _get_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise RuntimeError(f"Environment variable {name} must be positive, got {raw!r}")
    return value


def _get_log_level(name: str, default: str) -> str:
    level = (_get_env(name, default=default) or default).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Environment variable {name} is not a logging level: {level!r}")
    return level


@dataclass(frozen=True)
class Settings:
    """Defaults used by the command-line tools."""

    log_level: str = DEFAULT_LOG_LEVEL
    curve_range: float = DEFAULT_CURVE_RANGE
    curve_points: int = DEFAULT_CURVE_POINTS
    parity_tolerance: float = DEFAULT_PARITY_TOLERANCE

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=_get_log_level("BSPRICER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            curve_range=_get_float("BSPRICER_CURVE_RANGE", DEFAULT_CURVE_RANGE),
            curve_points=_get_int("BSPRICER_CURVE_POINTS", DEFAULT_CURVE_POINTS),
            parity_tolerance=_get_float(
                "BSPRICER_PARITY_TOLERANCE", DEFAULT_PARITY_TOLERANCE
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings; call ``get_settings.cache_clear()`` after changing the environment."""

    return Settings.from_env()
