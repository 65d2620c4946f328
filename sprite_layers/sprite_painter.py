"""Painter adapters used by sprites to draw themselves."""
from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QBrush, QFont, QPainter, QPen

from sprite_layers.opacity_utils import apply_sprite_opacity, resolve_color


class SpritePainterAdapter:
    def draw_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        fill: Optional[str],
        stroke: Optional[str],
        stroke_width: int,
        opacity: int,
    ) -> None: ...

    def draw_ellipse(
        self,
        cx: int,
        cy: int,
        rx: int,
        ry: int,
        *,
        fill: Optional[str],
        stroke: Optional[str],
        stroke_width: int,
        opacity: int,
    ) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, *, stroke: str, stroke_width: int, opacity: int) -> None: ...

    def draw_text(self, x: int, y: int, text: str, *, color: str, point_size: float, opacity: int) -> None: ...


class QtSpritePainterAdapter(SpritePainterAdapter):
    """Adapter over a live ``QPainter``."""

    def __init__(self, painter: QPainter, *, font_family: Optional[str] = None) -> None:
        self._painter = painter
        self._font_family = font_family

    def _pen(self, stroke: Optional[str], stroke_width: int, opacity: int) -> QPen:
        if not stroke or stroke_width <= 0:
            return QPen(Qt.PenStyle.NoPen)
        pen = QPen(apply_sprite_opacity(resolve_color(stroke), opacity))
        pen.setWidth(max(0, int(stroke_width)))
        return pen

    def _brush(self, fill: Optional[str], opacity: int) -> QBrush:
        if not fill:
            return QBrush(Qt.BrushStyle.NoBrush)
        return QBrush(apply_sprite_opacity(resolve_color(fill), opacity))

    def draw_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        fill: Optional[str],
        stroke: Optional[str],
        stroke_width: int,
        opacity: int,
    ) -> None:
        self._painter.setPen(self._pen(stroke, stroke_width, opacity))
        self._painter.setBrush(self._brush(fill, opacity))
        self._painter.drawRect(x, y, width, height)

    def draw_ellipse(
        self,
        cx: int,
        cy: int,
        rx: int,
        ry: int,
        *,
        fill: Optional[str],
        stroke: Optional[str],
        stroke_width: int,
        opacity: int,
    ) -> None:
        self._painter.setPen(self._pen(stroke, stroke_width, opacity))
        self._painter.setBrush(self._brush(fill, opacity))
        self._painter.drawEllipse(QPoint(cx, cy), rx, ry)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, *, stroke: str, stroke_width: int, opacity: int) -> None:
        self._painter.setPen(self._pen(stroke, max(1, stroke_width), opacity))
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawLine(x1, y1, x2, y2)

    def draw_text(self, x: int, y: int, text: str, *, color: str, point_size: float, opacity: int) -> None:
        font = QFont(self._font_family) if self._font_family else QFont()
        if point_size > 0:
            font.setPointSizeF(point_size)
        self._painter.setFont(font)
        self._painter.setPen(QPen(apply_sprite_opacity(resolve_color(color), opacity)))
        normalised = str(text).replace("\r\n", "\n").replace("\r", "\n")
        lines = normalised.split("\n") or [""]
        line_spacing = max(self._painter.fontMetrics().lineSpacing(), 0)
        for idx, line in enumerate(lines):
            self._painter.drawText(x, y + (line_spacing * idx), line)
