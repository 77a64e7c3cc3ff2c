"""Interaction state for the dual-handle clock wheel."""

from __future__ import annotations

import logging
import math
from datetime import time
from typing import Optional

from PySide6.QtCore import QObject, Signal

from clock_wheel.utils.duration_format import duration_label
from clock_wheel.utils.ring_geometry import (
    FULL_TURN_DEGREES,
    fraction_to_degrees,
    normalize_fraction,
    pointer_to_angle,
)
from .data_types import DragRegion, FeedbackMode
from .ring_config import RingConfig

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

# Largest float below 1.0; the arc end may not reach a full turn.
_LAST_FRACTION = math.nextafter(1.0, 0.0)


class RingModel(QObject):
    """Owns the start/end positions of the clock wheel and their drag rules.

    Positions are normalized fractions of a turn in [0, 1), 0 at the top of
    the ring and growing clockwise. Every mutation goes through
    ``_after_mutation`` which recomputes the goal flag before any signal is
    emitted, so listeners never see stale derived values.

    Signals:
        selection_changed: Emitted after every mutation with (start, end)
        goal_changed: Emitted when the goal-satisfied flag flips
        selection_feedback: Selection pulse for haptics, once per pointer sample
    """

    selection_changed = Signal(float, float)
    goal_changed = Signal(bool)
    selection_feedback = Signal()

    def __init__(self, config: Optional[RingConfig] = None, parent=None):
        super().__init__(parent)

        self._config = config or RingConfig()

        self._start: float = self._config.initial_start
        self._end: float = self._config.initial_end

        # Display angles in degrees, kept alongside the fractions for drawing
        self._start_angle: float = fraction_to_degrees(self._start)
        self._end_angle: float = fraction_to_degrees(self._end)

        # Draw-order hint for the host
        self._is_start_in_front = False

        self._goal_satisfied = self._compute_goal()

    @property
    def config(self) -> RingConfig:
        return self._config

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def start_angle(self) -> float:
        """Start handle position in degrees."""
        return self._start_angle

    @property
    def end_angle(self) -> float:
        """End handle position in degrees."""
        return self._end_angle

    @property
    def is_start_in_front(self) -> bool:
        return self._is_start_in_front

    @property
    def goal_satisfied(self) -> bool:
        return self._goal_satisfied

    @property
    def arc_length(self) -> float:
        """Length of the selected interval as a fraction of a turn."""
        return self._end - self._start

    # Pointer operations ---------------------------------------------------

    def drag(self, region: DragRegion, x: float, y: float):
        """Apply one pointer-move sample that started in ``region``.

        Args:
            region: Region the drag started in
            x: Pointer x in the ring frame
            y: Pointer y in the same frame
        """
        if region is DragRegion.WHOLE_ARC:
            self.drag_whole_arc(x, y)
        elif region is DragRegion.START_HANDLE:
            self.drag_start_handle(x, y)
        elif region is DragRegion.END_HANDLE:
            self.drag_end_handle(x, y)
        else:
            raise ValueError(f"Unknown drag region: {region!r}")

    def drag_whole_arc(self, x: float, y: float):
        """Move the whole arc so that it is centred on the pointer."""
        angle = pointer_to_angle(x, y, *self._config.center)
        self._emit_feedback()
        self.move_arc_to(angle / FULL_TURN_DEGREES)

    def drag_start_handle(self, x: float, y: float):
        """Move the start handle to the pointer."""
        angle = pointer_to_angle(x, y, *self._config.center)
        self._emit_feedback()
        self._place_start(angle / FULL_TURN_DEGREES, angle)

    def drag_end_handle(self, x: float, y: float):
        """Move the end handle to the pointer."""
        angle = pointer_to_angle(x, y, *self._config.center)
        self._emit_feedback()
        self._place_end(angle / FULL_TURN_DEGREES, angle)

    # Fraction operations ----------------------------------------------------

    def move_arc_to(self, center: float):
        """Centre the arc on ``center`` keeping its length.

        An arc pushed past the top of the ring is slid back so that it stays
        within [0, 1) with the same length.
        """
        center = normalize_fraction(center)
        length = self._end - self._start
        half = length / 2

        new_start = center - half
        new_end = center + half

        if new_start < 0:
            new_start = 0.0
            new_end = length
        if new_end >= 1:
            new_end = _LAST_FRACTION
            new_start = max(0.0, new_end - length)

        self._start = new_start
        self._end = new_end
        self._start_angle = fraction_to_degrees(new_start)
        self._end_angle = fraction_to_degrees(new_end)
        self._after_mutation()

    def move_start_to(self, current: float):
        """Move the start handle to ``current``.

        Moving start onto or past end collapses end onto start and brings
        the start handle to the front.

        Args:
            current: New start position as a fraction of a turn
        """
        self._place_start(current, fraction_to_degrees(current))

    def move_end_to(self, current: float):
        """Move the end handle to ``current``.

        A position of a full turn or more is ignored. An end that does not
        advance past the start angle pulls start along with it.

        Args:
            current: New end position as a fraction of a turn
        """
        self._place_end(current, fraction_to_degrees(current))

    def _place_start(self, current: float, angle: float):
        """Apply a start move; ``angle`` is the degree value ``current`` came from."""
        normalized = normalize_fraction(current)
        if normalized != current:
            angle = fraction_to_degrees(normalized)
        current = normalized

        if current >= self._end:
            logger.debug("Start crossed end at %.4f; collapsing end onto start", current)
            self._is_start_in_front = True
            self._start = current
            self._start_angle = fraction_to_degrees(current)
            self._end = self._start
            self._end_angle = fraction_to_degrees(self._start)
        else:
            self._is_start_in_front = False
            self._start = current
            self._start_angle = angle

        self._after_mutation()

    def _place_end(self, current: float, angle: float):
        """Apply an end move; ``angle`` is the degree value ``current`` came from."""
        if not math.isfinite(current):
            raise ValueError(f"Fraction must be finite, got {current!r}")
        if current >= 1:
            logger.debug("Ignoring end position %r at or past a full turn", current)
            return

        normalized = normalize_fraction(current)
        if normalized != current:
            angle = fraction_to_degrees(normalized)
        current = normalized

        self._end = current
        self._is_start_in_front = False

        if angle <= self._start_angle:
            logger.debug("End did not pass start at %.4f; pulling start along", current)
            self._end_angle = angle
            self._start = current
            self._start_angle = angle
        else:
            self._end_angle = angle

        self._after_mutation()

    def set_selection(self, start: float, end: float):
        """Replace both positions.

        Raises:
            ValueError: Unless 0 <= start <= end < 1
        """
        if not (math.isfinite(start) and math.isfinite(end)):
            raise ValueError(f"Positions must be finite, got ({start!r}, {end!r})")
        if not 0 <= start <= end < 1:
            raise ValueError(f"Positions must satisfy 0 <= start <= end < 1, got ({start!r}, {end!r})")

        self._start = start
        self._end = end
        self._start_angle = fraction_to_degrees(start)
        self._end_angle = fraction_to_degrees(end)
        self._after_mutation()

    # Derived values -----------------------------------------------------------

    def duration_label(self) -> str:
        """Short-form length of the interval, e.g. "6 hr 0 min"."""
        return duration_label(self.arc_length, self._config.minutes_per_turn)

    def caption_text(self) -> str:
        if self._goal_satisfied:
            return self._config.caption_satisfied
        return self._config.caption_unsatisfied

    def start_time(self) -> time:
        return self._fraction_to_time(self._start)

    def end_time(self) -> time:
        return self._fraction_to_time(self._end)

    def _fraction_to_time(self, fraction: float) -> time:
        minutes = math.floor(fraction * self._config.minutes_per_turn) % MINUTES_PER_DAY
        return time(hour=minutes // 60, minute=minutes % 60)

    def _compute_goal(self) -> bool:
        return (self._end - self._start) > self._config.goal_threshold

    def _after_mutation(self):
        """Recompute derived state, then notify listeners."""
        was_satisfied = self._goal_satisfied
        self._goal_satisfied = self._compute_goal()

        self.selection_changed.emit(self._start, self._end)
        if self._goal_satisfied != was_satisfied:
            self.goal_changed.emit(self._goal_satisfied)

    def _emit_feedback(self):
        if self._config.feedback_mode is FeedbackMode.EVERY_SAMPLE:
            self.selection_feedback.emit()
