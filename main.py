"""Clock Wheel - demo application entry point."""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication, QVBoxLayout, QWidget

from clock_wheel.config import load_ring_config
from clock_wheel.models import RingModel
from clock_wheel.ui import ClockWheelWidget

logger = logging.getLogger(__name__)


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Pick a start and end time on a clock wheel.")
    parser.add_argument("--config", help="Path to a YAML clock wheel configuration")
    parser.add_argument("--verbose", action="store_true", help="Log drag details")
    return parser.parse_known_args(argv)


def main():
    """Launch the clock wheel in a window."""
    args, qt_args = _parse_args(sys.argv[1:])

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    config = load_ring_config(args.config)

    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("Clock Wheel")

    model = RingModel(config)
    model.selection_feedback.connect(lambda: logger.debug("selection changed"))
    model.goal_changed.connect(lambda satisfied: logger.info("Goal satisfied: %s", satisfied))

    window = QWidget()
    window.setWindowTitle("Clock Wheel")
    layout = QVBoxLayout(window)
    layout.addWidget(ClockWheelWidget(model))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
