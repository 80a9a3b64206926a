"""Environment-driven settings."""

from __future__ import annotations

import os
from functools import lru_cache

from settle.core.utils.constants import (
    DEFAULT_DEMO_MAX_DELAY,
    DEFAULT_DEMO_START,
    DEFAULT_DEMO_STEP,
    DEFAULT_DEMO_STOP,
    DEFAULT_LOG_LEVEL,
)

__all__: list[str] = ["Settings", "get_settings"]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class Settings:  # noqa: D101
    def __init__(self) -> None:
        self.log_level: str = os.getenv("SETTLE_LOG_LEVEL", DEFAULT_LOG_LEVEL)

        # Demo request range
        self.demo_start: int = _env_int("SETTLE_DEMO_START", DEFAULT_DEMO_START)
        self.demo_stop: int = _env_int("SETTLE_DEMO_STOP", DEFAULT_DEMO_STOP)
        self.demo_step: int = _env_int("SETTLE_DEMO_STEP", DEFAULT_DEMO_STEP)
        self.demo_max_delay: float = _env_float("SETTLE_DEMO_MAX_DELAY", DEFAULT_DEMO_MAX_DELAY)


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # noqa: D401
    """Return cached Settings instance."""

    return Settings()
