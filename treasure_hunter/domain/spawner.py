"""Reactive obstacle placement on a uniformly chosen empty cell."""

from __future__ import annotations

import logging
from random import Random

from treasure_hunter.domain.cell import OBSTACLE
from treasure_hunter.domain.grid import Grid, Position

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    """Converts one random empty cell into an obstacle on request.

    The random source is injected so tests can pass ``Random(seed)``.
    """

    def __init__(self, grid: Grid, rng: Random) -> None:
        self._grid = grid
        self._rng = rng

    def place_random(self) -> Position | None:
        """Spawn an obstacle and return its coordinate, or ``None`` if the grid is full."""
        empty = self._grid.empty_positions()
        if not empty:
            return None
        row, col = empty[self._rng.randrange(len(empty))]
        self._grid.set_cell(row, col, OBSTACLE)
        logger.debug("Spawned obstacle at (%d, %d) from %d empty cells", row, col, len(empty))
        return (row, col)
