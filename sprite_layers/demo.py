"""Small window showing a nested layer tree."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt

from sprite_layers.draw_component import DrawComponent
from sprite_layers.layer import Layer
from sprite_layers.log_config import apply_log_level
from sprite_layers.settings import DrawSettings, load_settings
from sprite_layers.sprites import CircleSprite, LineSprite, RectSprite, TextSprite

_LOGGER = logging.getLogger("SpriteLayers.Demo")


def build_demo_scene(component: DrawComponent, offset_x: float = 0.0, offset_y: float = 0.0) -> Layer:
    """Attach a two-level layer tree to ``component`` and return the root."""

    badge = Layer(20, 20)
    badge.add(CircleSprite(30, 30, 24, fill="#3366cc", stroke="white", stroke_width=2))
    badge.add(TextSprite(18, 36, "L1", color="white", point_size=14))

    panel = Layer(40, 40)
    panel.add(RectSprite(0, 0, 240, 140, fill="#cc222222", stroke="#888888"))
    panel.add(LineSprite(10, 120, 220, 0, stroke="#ffaa00", stroke_width=3))
    panel.add(badge)
    panel.set_z_index(1)

    panel.attach(component)
    panel.set_member_cursor(Qt.CursorShape.PointingHandCursor)
    panel.set_x(panel.x + offset_x)
    panel.set_y(panel.y + offset_y)
    return panel


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sprite Layers demo window")
    parser.add_argument("--settings", help="Path to a JSON settings file")
    parser.add_argument("--offset-x", type=float, default=0.0, help="Shift the root layer horizontally")
    parser.add_argument("--offset-y", type=float, default=0.0, help="Shift the root layer vertically")
    args = parser.parse_args(argv)

    settings = load_settings(Path(args.settings).expanduser()) if args.settings else DrawSettings()
    apply_log_level(settings.log_level)

    from PyQt6.QtWidgets import QApplication

    from sprite_layers.draw_widget import DrawWidget

    app = QApplication(sys.argv)
    component = DrawComponent(settings)
    widget = DrawWidget(component)
    root = build_demo_scene(component, args.offset_x, args.offset_y)
    _LOGGER.info("Demo scene ready: %d sprite(s), root at (%.1f, %.1f)", len(component), root.x, root.y)
    widget.resize(360, 260)
    widget.setWindowTitle("Sprite Layers")
    widget.show()
    component.redraw_surface()
    return int(app.exec())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
