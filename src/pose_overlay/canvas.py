"""
PoseOverlayCanvas - transparent widget that paints the skeleton overlay.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional, Union

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QPointF
from PySide6.QtGui import QPainter, QColor, QPen, QBrush, QFont

from .exceptions import OverlayError
from .models import (
    DisplayMode, DrawCircle, DrawCommand, DrawLine, DrawPoint, DrawText, Paint, PoseResult,
)
from .renderer import OverlayRenderer
from .style import DEFAULT_STYLE, OverlayStyle

logger = logging.getLogger(__name__)


def _make_pen(paint: Paint, cap: Qt.PenCapStyle = Qt.PenCapStyle.FlatCap) -> QPen:
    pen = QPen(QColor(paint.color))
    pen.setWidthF(paint.stroke_width)
    pen.setCapStyle(cap)
    if paint.dash is not None and paint.stroke_width > 0:
        # Qt dash patterns are in units of the pen width
        on, off = paint.dash
        pen.setDashPattern([on / paint.stroke_width, off / paint.stroke_width])
    return pen


def paint_commands(painter: QPainter, commands: Iterable[DrawCommand]):
    """Rasterize draw commands with a QPainter"""
    for command in commands:
        paint = command.paint
        if isinstance(command, DrawLine):
            painter.setPen(_make_pen(paint))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawLine(QPointF(command.x1, command.y1), QPointF(command.x2, command.y2))
        elif isinstance(command, DrawPoint):
            # Stroke width is the point diameter; square caps match a filled point
            painter.setPen(_make_pen(paint, Qt.PenCapStyle.SquareCap))
            painter.drawPoint(QPointF(command.x, command.y))
        elif isinstance(command, DrawCircle):
            color = QColor(paint.color)
            painter.setPen(Qt.PenStyle.NoPen if paint.filled else _make_pen(paint))
            painter.setBrush(QBrush(color) if paint.filled else Qt.BrushStyle.NoBrush)
            painter.drawEllipse(QPointF(command.x, command.y), command.radius, command.radius)
        elif isinstance(command, DrawText):
            font = QFont()
            font.setPixelSize(max(1, int(round(paint.text_size))))
            painter.setFont(font)
            painter.setPen(QColor(paint.color))
            painter.drawText(QPointF(command.x, command.y), command.text)
        else:
            raise TypeError(f"unsupported draw command: {command!r}")


class PoseOverlayCanvas(QWidget):
    """Overlay widget placed above a camera or image preview"""

    def __init__(self, parent=None, style: OverlayStyle = DEFAULT_STYLE):
        super().__init__(parent)
        self.renderer = OverlayRenderer(style)
        self.last_error: Optional[OverlayError] = None

        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.renderer.set_view_size(self.width(), self.height())

    def set_results(self, result: PoseResult, image_height: int, image_width: int,
                    running_mode: Union[DisplayMode, str] = DisplayMode.STATIC):
        """New inference result; argument order follows the inference callback"""
        if not isinstance(running_mode, DisplayMode):
            running_mode = DisplayMode.from_running_mode(running_mode)
        self.renderer.set_view_size(self.width(), self.height())
        self.renderer.set_result(result, image_width, image_height, running_mode)
        self.update()

    def clear(self):
        self.renderer.clear()
        self.last_error = None
        self.update()

    def set_style(self, style: OverlayStyle):
        self.renderer.set_style(style)
        self.update()

    def _replace_style(self, **changes):
        self.set_style(replace(self.renderer.style, **changes))

    def set_line_width(self, width: float):
        self._replace_style(line_width=width)

    def set_point_size(self, size: float):
        self._replace_style(point_size=size)

    def set_text_size(self, size: float):
        self._replace_style(text_size=size)

    def set_threshold(self, degrees: float):
        self._replace_style(threshold=degrees)

    @property
    def scale_factor(self) -> float:
        return self.renderer.scale_factor

    def resizeEvent(self, event):
        self.renderer.set_view_size(event.size().width(), event.size().height())
        super().resizeEvent(event)

    def paintEvent(self, event):
        """Paint the current overlay; a malformed result skips the frame"""
        try:
            commands = self.renderer.render()
        except OverlayError as e:
            self.last_error = e
            logger.warning("Skipping overlay frame: %s", e)
            return
        self.last_error = None
        if not commands:
            return

        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            paint_commands(painter, commands)
        finally:
            painter.end()
