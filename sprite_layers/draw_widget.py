"""Qt widget that hosts a DrawComponent."""
from __future__ import annotations

from typing import Optional

from PyQt6.QtGui import QCursor, QPainter, QPaintEvent
from PyQt6.QtWidgets import QWidget

from sprite_layers.draw_component import DrawComponent
from sprite_layers.opacity_utils import resolve_color
from sprite_layers.sprite_painter import QtSpritePainterAdapter


class DrawWidget(QWidget):
    """Paints a DrawComponent; ``component.redraw_surface()`` schedules ``update``."""

    def __init__(self, component: Optional[DrawComponent] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._component = component if component is not None else DrawComponent()
        self._component.set_repaint_callback(self.update)
        cursor = self._component.settings.default_cursor
        if cursor is not None:
            self.setCursor(QCursor(cursor))

    @property
    def component(self) -> DrawComponent:
        return self._component

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802 - Qt override
        settings = self._component.settings
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, settings.antialiasing)
            painter.fillRect(self.rect(), resolve_color(settings.background_color, fallback="transparent"))
            adapter = QtSpritePainterAdapter(painter, font_family=settings.font_family)
            self._component.paint(adapter)
        finally:
            painter.end()
