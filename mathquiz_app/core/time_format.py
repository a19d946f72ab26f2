"""Formatting helpers for round clocks and results."""

from __future__ import annotations

import math


def format_remaining_time(seconds: float) -> str:
    """Format a countdown value as ``M:SS.t``, rounding tenths up.

    Rounding up keeps the display from reading ``0:00.0`` while time is left.
    """
    tenths = max(0, math.ceil(round(seconds * 10, 6)))
    minutes, tenths = divmod(tenths, 600)
    whole_seconds, tenth = divmod(tenths, 10)
    return f"{minutes}:{whole_seconds:02d}.{tenth}"


def format_elapsed_time(seconds: float) -> str:
    """Format a finished round duration, e.g. ``42.3 s`` or ``1:05.0``."""
    seconds = max(0.0, seconds)
    if seconds < 60:
        return f"{seconds:.1f} s"
    minutes, remainder = divmod(seconds, 60)
    return f"{int(minutes)}:{remainder:04.1f}"
