"""Board palettes, selectable by name through ``get_theme``.

The ``treasure-hunter --theme`` option and the ``theme`` config key pick
one of ``REGISTERED_THEMES``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Complete collection of board style tokens."""

    empty_cell_color: str = "#F0F0F0"
    obstacle_color: str = "#424242"
    hunter_color: str = "#2196F3"
    treasure_colors: dict[int, str] = field(
        default_factory=lambda: {5: "#FFE082", 6: "#FFCA28", 7: "#FFA000", 8: "#FF6F00"}
    )
    grid_line_color: str = "#CCCCCC"
    text_color: str = "#212121"
    background_color: str = "#FFFFFF"


DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    empty_cell_color="#1A1A1A",
    obstacle_color="#9E9E9E",
    hunter_color="#64B5F6",
    grid_line_color="#333333",
    text_color="#FAFAFA",
    background_color="#000000",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Return a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError as exc:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme '{name}'; expected one of {valid}") from exc
