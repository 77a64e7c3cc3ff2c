"""Geometry helpers mapping pointer positions onto the clock wheel ring.

Two coordinate spaces are involved:

* widget space: Qt's local coordinates, y grows downwards;
* ring frame: widget space rotated a quarter turn around the ring centre so
  that the top of the ring lies on the +x axis. ``atan2`` in the ring frame
  gives 0 at the top and grows clockwise, which is exactly a normalized
  position once divided by a full turn.
"""

from __future__ import annotations

import math
from typing import Tuple

FULL_TURN_DEGREES = 360.0


def pointer_to_angle(x: float, y: float, center_x: float, center_y: float) -> float:
    """Angle in degrees of a ring-frame point around a centre.

    Negative ``atan2`` results are shifted by a full turn. The result is in
    [0, 360] - a tiny negative angle can round up to exactly 360.
    """
    radians = math.atan2(y - center_y, x - center_x)
    angle = math.degrees(radians)
    if angle < 0:
        angle = FULL_TURN_DEGREES + angle
    return angle


def pointer_to_fraction(x: float, y: float, center_x: float, center_y: float) -> float:
    """Fraction of a full turn for a ring-frame point. Not clamped."""
    return pointer_to_angle(x, y, center_x, center_y) / FULL_TURN_DEGREES


def normalize_fraction(value: float) -> float:
    """Wrap a fraction into [0, 1).

    Raises:
        ValueError: If the value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Fraction must be finite, got {value!r}")
    wrapped = value % 1.0
    # -1e-20 % 1.0 evaluates to 1.0
    if wrapped >= 1.0:
        wrapped = 0.0
    return wrapped


def fraction_to_degrees(fraction: float) -> float:
    return fraction * FULL_TURN_DEGREES


def screen_to_ring_frame(x: float, y: float, center_x: float, center_y: float) -> Tuple[float, float]:
    """Rotate a widget-space point into the ring frame."""
    dx = x - center_x
    dy = y - center_y
    return center_x - dy, center_y + dx


def handle_center(fraction: float, radius: float, center_x: float, center_y: float) -> Tuple[float, float]:
    """Widget-space position of a handle sitting at ``fraction`` on the ring."""
    screen_angle = math.radians(fraction_to_degrees(fraction) - 90.0)
    return (
        center_x + radius * math.cos(screen_angle),
        center_y + radius * math.sin(screen_angle),
    )
