"""Matplotlib rendering of a game snapshot."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402

from treasure_hunter.config.constants import TREASURE_VALUES  # noqa: E402
from treasure_hunter.domain.cell import CellKind, Treasure  # noqa: E402
from treasure_hunter.domain.snapshot import GameSnapshot  # noqa: E402
from treasure_hunter.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

EMPTY_CODE = 0
OBSTACLE_CODE = 1
HUNTER_CODE = 2
TREASURE_CODES: dict[int, int] = {value: 3 + i for i, value in enumerate(TREASURE_VALUES)}
"""Integer code per treasure value, following the fixed codes above."""


def build_cell_array(snapshot: GameSnapshot) -> np.ndarray:
    """Return a (rows, cols) int array of cell codes."""
    grid = np.full((snapshot.rows, snapshot.cols), EMPTY_CODE, dtype=int)
    for r, row in enumerate(snapshot.cells):
        for c, cell in enumerate(row):
            if isinstance(cell, Treasure):
                grid[r, c] = TREASURE_CODES[cell.value]
            elif cell.kind is CellKind.OBSTACLE:
                grid[r, c] = OBSTACLE_CODE
            elif cell.kind is CellKind.HUNTER:
                grid[r, c] = HUNTER_CODE
    return grid


def _cell_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap: empty, obstacle, hunter, then one colour per treasure value."""
    colors = [theme.empty_cell_color, theme.obstacle_color, theme.hunter_color]
    colors.extend(theme.treasure_colors[value] for value in TREASURE_VALUES)
    cmap = ListedColormap(colors)
    bounds = [code - 0.5 for code in range(len(colors) + 1)]
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm


def render_board(
    snapshot: GameSnapshot,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    cell_inches: float = 0.6,
    dpi: int = 100,
) -> Path:
    """Draw the board with treasure values and the hunter marked, and save it."""
    if cell_inches <= 0:
        raise ValueError("cell_inches must be > 0")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    grid = build_cell_array(snapshot)
    cmap, norm = _cell_cmap(theme)
    fig, ax = plt.subplots(
        figsize=(max(snapshot.cols * cell_inches, 2.0), max(snapshot.rows * cell_inches, 2.0) + 0.5)
    )
    try:
        fig.patch.set_facecolor(theme.background_color)
        ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
        for x in range(snapshot.cols + 1):
            ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for y in range(snapshot.rows + 1):
            ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for r, row in enumerate(snapshot.cells):
            for c, cell in enumerate(row):
                if cell.kind in (CellKind.TREASURE, CellKind.HUNTER):
                    ax.text(c, r, cell.label, ha="center", va="center", color=theme.text_color)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(
            f"{snapshot.stage.value.title()} | score {snapshot.score} | "
            f"rounds {snapshot.rounds} | PI {snapshot.performance_index:.2f}",
            color=theme.text_color,
            fontsize=9,
        )
        fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    return output_path
