"""UI package exports for the clock wheel."""

from .clock_wheel_widget import ClockWheelWidget, ring_palette
from .hit_testing import hit_test


__all__ = [
    "ClockWheelWidget",
    "ring_palette",
    "hit_test",
]
