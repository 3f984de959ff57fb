"""environment-driven settings for underbar."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

SCHEDULERS = ("threading", "manual")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    scheduler: str = "threading"
    seed: Optional[int] = None


def load_settings() -> Settings:
    """read UNDERBAR_* variables from the environment"""
    log_level = os.getenv("UNDERBAR_LOG_LEVEL", "WARNING").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"UNDERBAR_LOG_LEVEL must be one of {LOG_LEVELS}, got '{log_level}'")

    scheduler = os.getenv("UNDERBAR_SCHEDULER", "threading").lower()
    if scheduler not in SCHEDULERS:
        raise ValueError(f"UNDERBAR_SCHEDULER must be one of {SCHEDULERS}, got '{scheduler}'")

    raw_seed = os.getenv("UNDERBAR_SEED")
    seed = None
    if raw_seed not in (None, ""):
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(f"UNDERBAR_SEED must be an integer, got '{raw_seed}'") from None

    return Settings(log_level=log_level, scheduler=scheduler, seed=seed)


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """process-wide settings, loaded once. call get_settings.cache_clear() to reload."""
    return load_settings()
