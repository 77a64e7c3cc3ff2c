"""Clock wheel widget with a draggable arc and two draggable handles."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QWidget

from clock_wheel.models import DragRegion, RingConfig, RingModel
from clock_wheel.utils.ring_geometry import handle_center, screen_to_ring_frame
from .hit_testing import hit_test

logger = logging.getLogger(__name__)

# Palette --------------------------------------------------------------------
SYSTEM_GRAY = "#8E8E93"
SYSTEM_GRAY3 = "#484849"
SYSTEM_GRAY5 = "#2C2C2E"
SYSTEM_GRAY6 = "#1C1C1E"
ACCENT_ORANGE = "#FF9500"
TRACK_COLOR = "#000000"
LABEL_COLOR = "#FFFFFF"
CAPTION_COLOR = "#8E8E93"

_PADDING = 20
_TEXT_AREA_HEIGHT = 80

# Bed for the start of the interval, alarm clock for the end
HANDLE_GLYPHS = {
    DragRegion.START_HANDLE: "\U0001F6CF",
    DragRegion.END_HANDLE: "\u23F0",
}


def ring_palette(goal_satisfied: bool) -> tuple[QColor, QColor, QColor]:
    """Arc, icon and dash colours for the current goal state."""
    if goal_satisfied:
        return QColor(SYSTEM_GRAY5), QColor(SYSTEM_GRAY), QColor(SYSTEM_GRAY6)
    return QColor(ACCENT_ORANGE), QColor(TRACK_COLOR), QColor(SYSTEM_GRAY3)


class ClockWheelWidget(QWidget):
    """Draws a ``RingModel`` and feeds pointer drags back into it.

    The widget only renders; all interaction rules live in the model. A
    press picks the region under the pointer and every following move is
    forwarded to ``RingModel.drag`` until the button is released.
    """

    def __init__(self, model: Optional[RingModel] = None, config: Optional[RingConfig] = None, parent=None):
        super().__init__(parent)

        self._model = model or RingModel(config)
        self._drag_region: Optional[DragRegion] = None

        self._model.selection_changed.connect(self._on_selection_changed)
        self._model.goal_changed.connect(self._on_goal_changed)

        cfg = self._model.config
        self._margin = cfg.track_width / 2 + _PADDING
        side = int(cfg.diameter + 2 * self._margin)
        self.setMinimumSize(side, side + _TEXT_AREA_HEIGHT)
        self.setCursor(Qt.CursorShape.ArrowCursor)
        self.setMouseTracking(True)

    @property
    def model(self) -> RingModel:
        return self._model

    @property
    def drag_region(self) -> Optional[DragRegion]:
        """Region grabbed by the current drag, if any."""
        return self._drag_region

    def ring_center(self) -> QPointF:
        """Ring centre in widget coordinates."""
        radius = self._model.config.radius
        return QPointF(self._margin + radius, self._margin + radius)

    def _ring_rect(self) -> QRectF:
        diameter = self._model.config.diameter
        return QRectF(self._margin, self._margin, diameter, diameter)

    def _to_model_point(self, pos: QPointF) -> tuple[float, float]:
        """Convert a widget position to the ring frame the model expects."""
        center = self.ring_center()
        ring_x, ring_y = screen_to_ring_frame(pos.x(), pos.y(), center.x(), center.y())
        return ring_x - self._margin, ring_y - self._margin

    def region_at(self, pos: QPointF) -> Optional[DragRegion]:
        cfg = self._model.config
        center = self.ring_center()
        return hit_test(
            pos.x(),
            pos.y(),
            center.x(),
            center.y(),
            cfg.radius,
            self._model.start,
            self._model.end,
            cfg.handle_size,
            cfg.track_width,
            self._model.is_start_in_front,
        )

    def _on_selection_changed(self, start: float, end: float):
        self.update()

    def _on_goal_changed(self, satisfied: bool):
        logger.debug("Goal %s", "satisfied" if satisfied else "not satisfied")
        self.update()

    def paintEvent(self, event):
        """Paint the ring, the selected arc, both handles and the labels."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        cfg = self._model.config
        model = self._model
        arc_color, icon_color, dash_color = ring_palette(model.goal_satisfied)

        painter.fillRect(self.rect(), QColor(SYSTEM_GRAY5))

        ring_rect = self._ring_rect()

        # Track
        painter.setPen(QPen(QBrush(QColor(TRACK_COLOR)), cfg.track_width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.FlatCap))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(ring_rect)

        # Qt arcs start at 3 o'clock, counter-clockwise, in 1/16 degree
        start_16 = int(round((90.0 - model.start_angle) * 16))
        span_16 = -int(round(model.arc_length * 360.0 * 16))

        if span_16:
            painter.setPen(QPen(QBrush(arc_color), cfg.arc_width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
            painter.drawArc(ring_rect, start_16, span_16)

            dash_pen = QPen(QBrush(dash_color), cfg.dash_width)
            dash_pen.setDashPattern([2.0 / cfg.dash_width, 3.0 / cfg.dash_width])
            faded = QColor(dash_color)
            faded.setAlphaF(0.5)
            dash_pen.setColor(faded)
            painter.setPen(dash_pen)
            painter.drawArc(ring_rect, start_16, span_16)

        # Handles, back one first
        handles = [(DragRegion.START_HANDLE, model.start), (DragRegion.END_HANDLE, model.end)]
        if model.is_start_in_front:
            handles.reverse()
        center = self.ring_center()
        half = cfg.handle_size / 2
        glyph_font = QFont()
        glyph_font.setPixelSize(max(1, int(cfg.handle_size * 0.55)))
        for region, fraction in handles:
            hx, hy = handle_center(fraction, cfg.radius, center.x(), center.y())
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(arc_color))
            painter.drawEllipse(QPointF(hx, hy), half, half)
            painter.setFont(glyph_font)
            painter.setPen(QPen(icon_color))
            painter.drawText(
                QRectF(hx - half, hy - half, cfg.handle_size, cfg.handle_size),
                Qt.AlignmentFlag.AlignCenter,
                HANDLE_GLYPHS[region],
            )

        # Labels
        text_top = ring_rect.bottom() + self._margin
        label_rect = QRectF(0, text_top, self.width(), 28)
        font = QFont()
        font.setPointSize(15)
        font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(font)
        painter.setPen(QPen(QColor(LABEL_COLOR)))
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, model.duration_label())

        caption = model.caption_text()
        if not model.goal_satisfied:
            caption = f"⚠ {caption}"
        caption_rect = QRectF(_PADDING, text_top + 30, self.width() - 2 * _PADDING, 40)
        font.setPointSize(10)
        font.setWeight(QFont.Weight.Normal)
        painter.setFont(font)
        painter.setPen(QPen(QColor(CAPTION_COLOR)))
        painter.drawText(
            caption_rect,
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
            caption,
        )

    def mousePressEvent(self, event):
        """Grab the region under the pointer."""
        if event.button() != Qt.MouseButton.LeftButton:
            return

        region = self.region_at(event.position())
        if region is None:
            return

        self._drag_region = region
        self.setCursor(Qt.CursorShape.ClosedHandCursor)
        event.accept()

    def mouseMoveEvent(self, event):
        """Forward drags to the model, or update the hover cursor."""
        pos = event.position()

        if self._drag_region is not None:
            x, y = self._to_model_point(pos)
            self._model.drag(self._drag_region, x, y)
            event.accept()
            return

        if self.region_at(pos) is None:
            self.setCursor(Qt.CursorShape.ArrowCursor)
        else:
            self.setCursor(Qt.CursorShape.OpenHandCursor)

    def mouseReleaseEvent(self, event):
        """End the current drag."""
        self._drag_region = None
        self.setCursor(Qt.CursorShape.ArrowCursor)
