"""Leaf sprites: concrete drawables that live inside layers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from sprite_layers.member import LayerMember
from sprite_layers.opacity_utils import coerce_percent
from sprite_layers.sprite_painter import SpritePainterAdapter

if TYPE_CHECKING:
    from sprite_layers.draw_component import DrawComponent
    from sprite_layers.layer import Layer


def _px(value: float) -> int:
    return int(round(value))


class Sprite(LayerMember):
    """Base drawable.

    ``x``/``y``/``z_index`` are the resolved drawing coordinates; the ``local_*``
    values are relative to the owning layer. Outside a layer both agree.
    ``component`` is the DrawComponent the sprite is registered with, if any.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z_index: int = 0,
        *,
        opacity: Any = 100,
        hidden: bool = False,
    ) -> None:
        super().__init__(x, y, z_index)
        self.x = x
        self.y = y
        self.z_index = z_index
        self.component: Optional["DrawComponent"] = None
        self.hidden = hidden
        self.opacity = coerce_percent(opacity, 100)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r}, z_index={self.z_index!r})"

    def paint(self, adapter: SpritePainterAdapter) -> None:
        raise NotImplementedError

    def _resolve_x(self) -> None:
        self.x = self._local_x + self._owner_x()

    def _resolve_y(self) -> None:
        self.y = self._local_y + self._owner_y()

    def _resolve_z(self) -> None:
        self.z_index = self._local_z + self._owner_z()

    def _deploy_to(self, surface: "DrawComponent") -> None:
        if self.component is not None:
            return
        surface.add_sprite(self)

    def _undeploy_from(self, surface: Optional["DrawComponent"]) -> None:
        if surface is not None:
            surface.remove_sprite(self)

    def _discard_from(self, owner: "Layer") -> None:
        surface = owner.surface
        if surface is not None and owner.attached:
            surface.remove_sprite(self)

    def _contains(self, target: LayerMember) -> bool:
        return self is target

    def _apply_cursor(self, cursor: Any) -> None:
        self.cursor = cursor


class RectSprite(Sprite):
    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        *,
        fill: Optional[str] = "white",
        stroke: Optional[str] = None,
        stroke_width: int = 1,
        z_index: int = 0,
        opacity: Any = 100,
    ) -> None:
        super().__init__(x, y, z_index, opacity=opacity)
        self.width = width
        self.height = height
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = stroke_width

    def paint(self, adapter: SpritePainterAdapter) -> None:
        adapter.draw_rect(
            _px(self.x),
            _px(self.y),
            _px(self.width),
            _px(self.height),
            fill=self.fill,
            stroke=self.stroke,
            stroke_width=self.stroke_width,
            opacity=self.opacity,
        )


class CircleSprite(Sprite):
    """Circle centred on (x, y)."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        radius: float = 0.0,
        *,
        fill: Optional[str] = "white",
        stroke: Optional[str] = None,
        stroke_width: int = 1,
        z_index: int = 0,
        opacity: Any = 100,
    ) -> None:
        super().__init__(x, y, z_index, opacity=opacity)
        self.radius = radius
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = stroke_width

    def paint(self, adapter: SpritePainterAdapter) -> None:
        radius = _px(max(self.radius, 0.0))
        adapter.draw_ellipse(
            _px(self.x),
            _px(self.y),
            radius,
            radius,
            fill=self.fill,
            stroke=self.stroke,
            stroke_width=self.stroke_width,
            opacity=self.opacity,
        )


class LineSprite(Sprite):
    """Segment from (x, y) to (x + dx, y + dy)."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        dx: float = 0.0,
        dy: float = 0.0,
        *,
        stroke: str = "white",
        stroke_width: int = 1,
        z_index: int = 0,
        opacity: Any = 100,
    ) -> None:
        super().__init__(x, y, z_index, opacity=opacity)
        self.dx = dx
        self.dy = dy
        self.stroke = stroke
        self.stroke_width = stroke_width

    def paint(self, adapter: SpritePainterAdapter) -> None:
        adapter.draw_line(
            _px(self.x),
            _px(self.y),
            _px(self.x + self.dx),
            _px(self.y + self.dy),
            stroke=self.stroke,
            stroke_width=self.stroke_width,
            opacity=self.opacity,
        )


class TextSprite(Sprite):
    """Text drawn with its first baseline at (x, y)."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        text: str = "",
        *,
        color: str = "white",
        point_size: float = 12.0,
        z_index: int = 0,
        opacity: Any = 100,
    ) -> None:
        super().__init__(x, y, z_index, opacity=opacity)
        self.text = text
        self.color = color
        self.point_size = point_size

    def paint(self, adapter: SpritePainterAdapter) -> None:
        if not self.text:
            return
        adapter.draw_text(
            _px(self.x),
            _px(self.y),
            self.text,
            color=self.color,
            point_size=self.point_size,
            opacity=self.opacity,
        )
