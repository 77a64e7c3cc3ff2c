"""Mapping a press on the clock wheel to the region it grabs."""

from __future__ import annotations

import math
from typing import Optional

from clock_wheel.models.data_types import DragRegion
from clock_wheel.utils.ring_geometry import (
    handle_center,
    normalize_fraction,
    pointer_to_fraction,
    screen_to_ring_frame,
)


def hit_test(
    x: float,
    y: float,
    center_x: float,
    center_y: float,
    radius: float,
    start: float,
    end: float,
    handle_size: float,
    band_width: float,
    start_in_front: bool = False,
) -> Optional[DragRegion]:
    """Find which draggable region a widget-space press belongs to.

    Handles take precedence over the arc, and the handle drawn in front
    takes precedence over the one behind it. The arc region is the ring
    band ``band_width`` wide, restricted to the filled span [start, end].

    Returns:
        The region hit, or None if the press is outside every region
    """
    handles = [
        (DragRegion.END_HANDLE, end),
        (DragRegion.START_HANDLE, start),
    ]
    if start_in_front:
        handles.reverse()

    handle_radius = handle_size / 2
    for region, fraction in handles:
        hx, hy = handle_center(fraction, radius, center_x, center_y)
        if math.hypot(x - hx, y - hy) <= handle_radius:
            return region

    distance = math.hypot(x - center_x, y - center_y)
    if abs(distance - radius) > band_width / 2:
        return None

    ring_x, ring_y = screen_to_ring_frame(x, y, center_x, center_y)
    fraction = normalize_fraction(pointer_to_fraction(ring_x, ring_y, center_x, center_y))
    if start <= fraction <= end:
        return DragRegion.WHOLE_ARC
    return None
