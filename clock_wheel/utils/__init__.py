"""Utility functions and helpers."""

from .ring_geometry import (
    pointer_to_angle,
    pointer_to_fraction,
    normalize_fraction,
    fraction_to_degrees,
    screen_to_ring_frame,
    handle_center,
)
from .duration_format import interval_minutes, format_duration, duration_label

__all__ = [
    'pointer_to_angle',
    'pointer_to_fraction',
    'normalize_fraction',
    'fraction_to_degrees',
    'screen_to_ring_frame',
    'handle_center',
    'interval_minutes',
    'format_duration',
    'duration_label',
]
