"""Centralized game constants.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_ROWS = 5
"""Default grid height in cells."""

DEFAULT_COLS = 5
"""Default grid width in cells."""

TREASURE_VALUES: tuple[int, ...] = (5, 6, 7, 8)
"""Allowed treasure values, in ledger order."""

DIRECTION_KEYS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
}
"""Keyboard shortcuts accepted for movement, mapped to direction names."""

OBSTACLE_TOKEN = "o"
"""Placement token for an obstacle."""

HUNTER_TOKEN = "h"
"""Placement token for the hunter."""

FLUSH_THRESHOLD = 4_096
"""Flush move-log rows to Parquet once this in-memory row count is reached."""

PERFORMANCE_INDEX_PLACES = 2
"""Decimal places kept by the performance index (round-half-up)."""

DEFAULT_OUT_DIR = "data"
"""Default directory for playthrough artifacts."""

THEME_NAMES: tuple[str, ...] = ("default", "dark")
"""Board palettes registered in ``treasure_hunter.viz.theme``."""

DEFAULT_THEME_NAME = "default"
"""Palette used when none is requested."""
