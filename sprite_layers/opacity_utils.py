"""Helpers for applying sprite opacity to colours."""
from __future__ import annotations

from typing import Any

from PyQt6.QtGui import QColor


def coerce_percent(value: Any, default: int = 100) -> int:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return default
    numeric = int(round(numeric))
    if numeric < 0:
        return 0
    if numeric > 100:
        return 100
    return numeric


def resolve_color(value: Any, fallback: str = "white") -> QColor:
    """Parse a colour string (``#rrggbb``, ``#aarrggbb`` or a Qt name)."""

    if isinstance(value, QColor):
        return QColor(value) if value.isValid() else QColor(fallback)
    if not isinstance(value, str) or not value.strip():
        return QColor(fallback)
    color = QColor(value.strip())
    if not color.isValid():
        return QColor(fallback)
    return color


def apply_sprite_opacity(color: QColor, opacity_percent: Any) -> QColor:
    """Scale the colour's alpha by the sprite opacity percentage."""

    if not color.isValid():
        return color
    percent = coerce_percent(opacity_percent, 100)
    if percent >= 100:
        return color
    new_alpha = int(round(color.alpha() * (percent / 100.0)))
    if new_alpha == color.alpha():
        return color
    return QColor(color.red(), color.green(), color.blue(), new_alpha)
