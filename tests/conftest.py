"""Pytest configuration for tests."""

import os
import sys
from pathlib import Path

import pytest

# Run Qt headless unless a platform is explicitly chosen
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the parent directory to the path so we can import clock_wheel
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

from clock_wheel.models import RingConfig, RingModel


class SignalRecorder:
    """Collects the arguments of every emission of a Qt signal."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def ring_config() -> RingConfig:
    return RingConfig()


@pytest.fixture
def ring_model(ring_config: RingConfig) -> RingModel:
    return RingModel(ring_config)


@pytest.fixture
def record():
    """Factory fixture returning a ``SignalRecorder`` for a signal."""
    return SignalRecorder
