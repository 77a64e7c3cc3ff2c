"""Core data types for the clock wheel interaction model."""

from enum import Enum


class DragRegion(Enum):
    """Draggable regions of the ring that tag incoming pointer events."""
    WHOLE_ARC = "whole_arc"
    START_HANDLE = "start_handle"
    END_HANDLE = "end_handle"


class FeedbackMode(Enum):
    """When the selection feedback pulse fires."""
    EVERY_SAMPLE = "every_sample"
    OFF = "off"
