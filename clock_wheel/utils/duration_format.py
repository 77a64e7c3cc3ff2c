"""Short-form duration labels."""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


def interval_minutes(length: float, minutes_per_turn: int) -> int:
    """Whole minutes covered by an arc ``length`` of a full turn."""
    return math.floor(length * minutes_per_turn)


def format_duration(minutes: int) -> str:
    """Format minutes as hours and minutes, e.g. ``"6 hr 0 min"``.

    Raises:
        ValueError: If minutes is negative
    """
    if minutes < 0:
        raise ValueError(f"Duration cannot be negative: {minutes}")
    hours, remainder = divmod(int(minutes), 60)
    return f"{hours} hr {remainder} min"


def duration_label(length: float, minutes_per_turn: int) -> str:
    """Label for an arc length, or an empty string if it cannot be formatted."""
    try:
        return format_duration(interval_minutes(length, minutes_per_turn))
    except (ValueError, OverflowError) as exc:
        logger.debug("Cannot format duration for arc length %r: %s", length, exc)
        return ""
