"""Configuration layer: constants and typed config dataclasses."""

from treasure_hunter.config.constants import (
    DEFAULT_COLS,
    DEFAULT_OUT_DIR,
    DEFAULT_ROWS,
    DEFAULT_THEME_NAME,
    DIRECTION_KEYS,
    FLUSH_THRESHOLD,
    HUNTER_TOKEN,
    OBSTACLE_TOKEN,
    PERFORMANCE_INDEX_PLACES,
    THEME_NAMES,
    TREASURE_VALUES,
)
from treasure_hunter.config.types import Placement, PlaythroughConfig, SessionConfig

__all__ = [
    "DEFAULT_COLS",
    "DEFAULT_OUT_DIR",
    "DEFAULT_ROWS",
    "DEFAULT_THEME_NAME",
    "DIRECTION_KEYS",
    "FLUSH_THRESHOLD",
    "HUNTER_TOKEN",
    "OBSTACLE_TOKEN",
    "PERFORMANCE_INDEX_PLACES",
    "Placement",
    "PlaythroughConfig",
    "SessionConfig",
    "THEME_NAMES",
    "TREASURE_VALUES",
]
