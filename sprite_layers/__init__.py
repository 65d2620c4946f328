from .draw_component import DrawComponent
from .errors import AlreadyAttachedError, LayerError, NotAttachedError
from .layer import Layer
from .member import LayerMember
from .settings import DrawSettings, load_settings
from .sprites import CircleSprite, LineSprite, RectSprite, Sprite, TextSprite
from .version import __version__

__all__ = [
    "Layer",
    "LayerMember",
    "Sprite",
    "RectSprite",
    "CircleSprite",
    "LineSprite",
    "TextSprite",
    "DrawComponent",
    "DrawSettings",
    "load_settings",
    "LayerError",
    "AlreadyAttachedError",
    "NotAttachedError",
    "__version__",
]
