"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the tool runs in development mode."""
    value = os.environ.get("LCG_ENV") or os.environ.get("LCG_DEV_MODE")
    if not value:
        return False
    normalized = value.strip().lower()
    return normalized in {"dev", "development", "1", "true", "yes"}


def perf_debug_enabled() -> bool:
    """Return True when PERF timing logs were requested via LCG_PERF_DEBUG."""
    return os.environ.get("LCG_PERF_DEBUG", "0") == "1"


__all__ = ["is_dev_mode", "perf_debug_enabled"]
