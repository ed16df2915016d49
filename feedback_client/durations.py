"""Display duration presets, in milliseconds."""
from __future__ import annotations

from typing import Any

LENGTH_DEFAULT = 5_000
LENGTH_MEDIUM = 8_000
LENGTH_LONG = 15_000

# Toolkit banner length used when a message has no duration.
BANNER_LENGTH_LONG = 2_750


def coerce_duration(value: Any, default: int = LENGTH_DEFAULT) -> int:
    if value is None:
        return default
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        return default
    return max(0, numeric)
