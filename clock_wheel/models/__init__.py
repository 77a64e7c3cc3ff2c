"""Interaction model and data types for the clock wheel."""

from .data_types import (
    DragRegion,
    FeedbackMode,
)
from .ring_config import ConfigError, RingConfig
from .ring_model import RingModel

__all__ = [
    "DragRegion",
    "FeedbackMode",
    "ConfigError",
    "RingConfig",
    "RingModel",
]
