"""Configuration helpers for draw components and their host widget."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from PyQt6.QtCore import Qt

from sprite_layers.opacity_utils import resolve_color

_LOGGER = logging.getLogger("SpriteLayers.Settings")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class DrawSettings:
    """Values used to set up a DrawComponent before anything is painted."""

    background_color: str = "#00000000"
    antialiasing: bool = True
    default_cursor: Optional[Qt.CursorShape] = None
    font_family: Optional[str] = None
    log_level: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DrawSettings":
        """Create an instance from a settings mapping, ignoring invalid values."""

        defaults = cls()

        def _bool(value: Any, fallback: bool) -> bool:
            if value is None:
                return fallback
            if isinstance(value, str):
                token = value.strip().lower()
                if token in {"1", "true", "yes", "on"}:
                    return True
                if token in {"0", "false", "no", "off"}:
                    return False
                return fallback
            return bool(value)

        def _color(value: Any, fallback: str) -> str:
            if not isinstance(value, str) or not value.strip():
                return fallback
            token = value.strip()
            if not resolve_color(token, fallback="").isValid():
                return fallback
            return token

        def _str(value: Any, fallback: Optional[str]) -> Optional[str]:
            if value is None:
                return fallback
            text = str(value).strip()
            return text or fallback

        def _level(value: Any) -> Optional[str]:
            if value is None:
                return None
            token = str(value).strip().upper()
            if token in _LOG_LEVELS:
                return token
            return None

        return cls(
            background_color=_color(payload.get("background_color"), defaults.background_color),
            antialiasing=_bool(payload.get("antialiasing"), defaults.antialiasing),
            default_cursor=parse_cursor(payload.get("default_cursor")),
            font_family=_str(payload.get("font_family"), defaults.font_family),
            log_level=_level(payload.get("log_level")),
        )


def parse_cursor(value: Any) -> Optional[Qt.CursorShape]:
    """Map ``"PointingHandCursor"``, ``"pointing_hand"`` or an int to a cursor shape."""

    if value is None:
        return None
    if isinstance(value, Qt.CursorShape):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Qt.CursorShape(value)
        except ValueError:
            return None
    if not isinstance(value, str):
        return None
    token = value.strip()
    if not token:
        return None
    candidates = [token]
    if not token.endswith("Cursor"):
        camel = "".join(part.capitalize() for part in token.replace("-", "_").split("_") if part)
        candidates.extend((f"{token}Cursor", f"{camel}Cursor"))
    for name in candidates:
        try:
            return Qt.CursorShape[name]
        except KeyError:
            continue
    return None


def load_settings(path: Union[str, Path]) -> DrawSettings:
    """Read settings JSON from ``path``; defaults are used when it is unusable."""

    settings_path = Path(path)
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _LOGGER.debug("Settings file %s not found; using defaults", settings_path)
        return DrawSettings()
    except OSError as exc:
        _LOGGER.warning("Failed to read settings file %s: %s", settings_path, exc)
        return DrawSettings()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        _LOGGER.warning("Settings file %s is not valid JSON: %s", settings_path, exc)
        return DrawSettings()
    if not isinstance(payload, Mapping):
        _LOGGER.warning("Settings file %s must contain a JSON object", settings_path)
        return DrawSettings()
    return DrawSettings.from_payload(payload)
