"""Level handling for the ``SpriteLayers`` logger family."""
from __future__ import annotations

import logging
import os
from typing import Optional

LOGGER_NAME = "SpriteLayers"
DEV_MODE_ENV_VAR = "SPRITE_LAYERS_DEV_MODE"


def dev_mode_enabled() -> bool:
    token = os.getenv(DEV_MODE_ENV_VAR, "").strip().lower()
    return token in {"1", "true", "yes", "on"}


def apply_log_level(level_name: Optional[str] = None) -> int:
    """Set the level of every ``SpriteLayers.*`` logger and return it.

    Dev mode forces DEBUG. Otherwise ``level_name`` is used when it names a
    standard level, and WARNING is the fallback.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if dev_mode_enabled():
        numeric = logging.DEBUG
    else:
        numeric = logging.WARNING
        if level_name:
            candidate = logging.getLevelName(level_name.strip().upper())
            if isinstance(candidate, int):
                numeric = candidate
    logger.setLevel(numeric)
    return numeric
