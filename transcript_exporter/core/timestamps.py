"""Timestamp display rules shared by every formatter.

WHY: Text, PDF and DOCX exports show compact "M:SS" markers, while SRT
demands the fixed "HH:MM:SS,mmm" form. Keeping both here guarantees all
outputs agree on rounding and padding.

RULES:
- Under one hour: "M:SS" (minutes unpadded, seconds two digits)
- One hour and above: "H:MM:SS"
- Display markers floor to whole seconds
- SRT: always two-digit hours/minutes/seconds and three-digit millis
- Negative, NaN and infinite input is clamped to zero, never raised
"""

from __future__ import annotations

import math


def clamp_seconds(seconds: float) -> float:
    """Clamp a time value to a finite, non-negative number of seconds."""
    try:
        value = float(seconds)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def format_timestamp(seconds: float) -> str:
    """Format seconds as "M:SS", or "H:MM:SS" from one hour upward.

    >>> format_timestamp(65)
    '1:05'
    >>> format_timestamp(3661)
    '1:01:01'
    """
    total = int(math.floor(clamp_seconds(seconds)))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return "{}:{:02d}:{:02d}".format(hours, minutes, secs)
    return "{}:{:02d}".format(minutes, secs)


def format_srt_timestamp(seconds: float) -> str:
    """Format seconds as an SRT timestamp, "HH:MM:SS,mmm".

    Rounds to the nearest millisecond on the total, so 1.9996 becomes
    "00:00:02,000" rather than a 1000 ms field.
    """
    total_ms = int(round(clamp_seconds(seconds) * 1000))
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)
