"""Rendering surface that sprites register with before they are painted."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from sprite_layers.settings import DrawSettings
from sprite_layers.sprite_painter import SpritePainterAdapter
from sprite_layers.sprites import Sprite

_LOGGER = logging.getLogger("SpriteLayers.DrawComponent")


class DrawComponent:
    """Holds the registered sprites and paints them in z-index order.

    Sprites with equal z-index paint in registration order. Nothing here
    repaints on its own; callers invoke :meth:`redraw_surface` after changes.
    """

    def __init__(
        self,
        settings: Optional[DrawSettings] = None,
        *,
        request_repaint: Optional[Callable[[], None]] = None,
    ) -> None:
        self.settings = settings if settings is not None else DrawSettings()
        self._request_repaint = request_repaint
        self._sprites: List[Sprite] = []

    @property
    def sprites(self) -> Tuple[Sprite, ...]:
        """Registered sprites in paint order."""

        return tuple(sorted(self._sprites, key=lambda sprite: sprite.z_index))

    def __len__(self) -> int:
        return len(self._sprites)

    def __contains__(self, sprite: object) -> bool:
        return any(entry is sprite for entry in self._sprites)

    def set_repaint_callback(self, callback: Optional[Callable[[], None]]) -> None:
        self._request_repaint = callback

    def add_sprite(self, sprite: Sprite) -> None:
        if sprite in self:
            _LOGGER.warning("Sprite %r is already registered; ignoring duplicate add", sprite)
            return
        self._sprites.append(sprite)
        sprite.component = self
        if sprite.cursor is None and self.settings.default_cursor is not None:
            sprite.cursor = self.settings.default_cursor

    def remove_sprite(self, sprite: Sprite) -> None:
        for index, entry in enumerate(self._sprites):
            if entry is sprite:
                del self._sprites[index]
                if sprite.component is self:
                    sprite.component = None
                return
        _LOGGER.debug("Sprite %r is not registered; nothing to remove", sprite)

    def paint(self, adapter: SpritePainterAdapter) -> int:
        """Paint every visible sprite; returns the number painted."""

        painted = 0
        for sprite in self.sprites:
            if sprite.hidden:
                continue
            sprite.paint(adapter)
            painted += 1
        return painted

    def redraw_surface(self) -> None:
        callback = self._request_repaint
        if callback is None:
            _LOGGER.debug("redraw_surface called without a repaint callback")
            return
        callback()
