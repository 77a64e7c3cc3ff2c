"""Circular dual-handle time range selector."""

__version__ = "0.1.0"
