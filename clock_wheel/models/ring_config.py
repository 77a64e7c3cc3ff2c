"""Geometry and behaviour settings for one clock wheel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .data_types import FeedbackMode


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class RingConfig:
    """Geometry and behaviour settings for one clock wheel."""

    diameter: float = 260.0
    """Diameter of the ring centre line, in pixels."""

    track_width: float = 50.0
    """Stroke width of the background track; also the arc hit band."""

    arc_width: float = 40.0
    dash_width: float = 13.0
    handle_size: float = 30.0

    goal_threshold: float = 0.3
    """Fraction of a turn the interval must exceed to satisfy the goal."""

    minutes_per_turn: int = 1440

    feedback_mode: FeedbackMode = FeedbackMode.EVERY_SAMPLE

    initial_start: float = 0.0
    initial_end: float = 0.25

    caption_satisfied: str = "This interval meets your sleeping schedule"
    caption_unsatisfied: str = "This interval does not meet your goal schedule"

    def __post_init__(self):
        for name in ("diameter", "track_width", "arc_width", "dash_width", "handle_size"):
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive number, got {value!r}")
        if not _is_number(self.goal_threshold) or not 0 < self.goal_threshold < 1:
            raise ConfigError(f"goal_threshold must be within (0, 1), got {self.goal_threshold!r}")
        if not isinstance(self.minutes_per_turn, int) or isinstance(self.minutes_per_turn, bool):
            raise ConfigError(f"minutes_per_turn must be an integer, got {self.minutes_per_turn!r}")
        if self.minutes_per_turn <= 0:
            raise ConfigError(f"minutes_per_turn must be positive, got {self.minutes_per_turn!r}")
        if not isinstance(self.feedback_mode, FeedbackMode):
            raise ConfigError(f"feedback_mode must be a FeedbackMode, got {self.feedback_mode!r}")
        if not (_is_number(self.initial_start) and _is_number(self.initial_end)):
            raise ConfigError(
                f"initial positions must be numbers, got ({self.initial_start!r}, {self.initial_end!r})"
            )
        if not 0 <= self.initial_start <= self.initial_end < 1:
            raise ConfigError(
                "initial_start and initial_end must satisfy 0 <= start <= end < 1, "
                f"got ({self.initial_start!r}, {self.initial_end!r})"
            )
        for name in ("caption_satisfied", "caption_unsatisfied"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string, got {getattr(self, name)!r}")

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def center(self) -> Tuple[float, float]:
        """Ring centre in the ring's own frame (origin at its bounding box corner)."""
        return (self.radius, self.radius)
