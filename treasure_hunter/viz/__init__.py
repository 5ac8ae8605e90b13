"""Visualization package: board rendering and theme presets."""

from treasure_hunter.viz.render import build_cell_array, render_board
from treasure_hunter.viz.theme import DEFAULT_THEME, DARK_THEME, Theme, get_theme

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "Theme",
    "build_cell_array",
    "get_theme",
    "render_board",
]
