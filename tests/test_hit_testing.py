"""Tests for mapping presses to draggable regions."""

import math

import pytest

from clock_wheel.models import DragRegion
from clock_wheel.ui.hit_testing import hit_test

CENTER = (175.0, 175.0)
RADIUS = 130.0
HANDLE_SIZE = 30.0
BAND = 50.0


def _on_ring(fraction: float, offset: float = 0.0):
    """Widget-space point on the ring at ``fraction``, ``offset`` px outwards."""
    angle = math.radians(fraction * 360.0 - 90.0)
    r = RADIUS + offset
    return CENTER[0] + r * math.cos(angle), CENTER[1] + r * math.sin(angle)


def _hit(point, start=0.0, end=0.25, start_in_front=False):
    return hit_test(
        point[0], point[1], CENTER[0], CENTER[1], RADIUS, start, end, HANDLE_SIZE, BAND, start_in_front
    )


class TestHitTest:

    def test_start_handle(self):
        assert _hit((175.0, 45.0)) is DragRegion.START_HANDLE

    def test_end_handle(self):
        assert _hit((305.0, 175.0)) is DragRegion.END_HANDLE

    def test_handle_edge(self):
        assert _hit((175.0 + 14.0, 45.0)) is DragRegion.START_HANDLE

    @pytest.mark.parametrize("offset", [0.0, 20.0, -20.0])
    def test_arc_band(self, offset):
        assert _hit(_on_ring(0.125, offset)) is DragRegion.WHOLE_ARC

    def test_outside_band(self):
        assert _hit(_on_ring(0.125, 30.0)) is None
        assert _hit(_on_ring(0.125, -30.0)) is None

    def test_ring_outside_selected_span(self):
        assert _hit(_on_ring(0.5)) is None

    def test_center(self):
        assert _hit(CENTER) is None

    def test_end_handle_wins_when_collapsed(self):
        point = _on_ring(0.5)
        assert _hit(point, start=0.5, end=0.5) is DragRegion.END_HANDLE

    def test_front_start_handle_wins_when_collapsed(self):
        point = _on_ring(0.5)
        assert _hit(point, start=0.5, end=0.5, start_in_front=True) is DragRegion.START_HANDLE

    def test_handles_take_precedence_over_arc(self):
        # Inside the end handle and inside the arc band
        point = _on_ring(0.25 - 0.01)
        assert _hit(point) is DragRegion.END_HANDLE
