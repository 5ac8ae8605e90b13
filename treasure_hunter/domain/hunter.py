"""Hunter position, movement rules and the mobility check."""

from __future__ import annotations

from enum import Enum

from treasure_hunter.domain.cell import EMPTY, HUNTER, CellKind, Treasure
from treasure_hunter.domain.grid import Grid, Position
from treasure_hunter.domain.outcomes import ErrorKind, MoveResult
from treasure_hunter.domain.score import ScoreKeeper
from treasure_hunter.domain.spawner import ObstacleSpawner


class Direction(Enum):
    """Unit moves as ``(d_row, d_col)`` offsets."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    def apply(self, position: Position) -> Position:
        d_row, d_col = self.value
        return (position[0] + d_row, position[1] + d_col)


class HunterAgent:
    """Tracks the single hunter and performs legal moves on the grid."""

    def __init__(self, grid: Grid, spawner: ObstacleSpawner, score: ScoreKeeper) -> None:
        self._grid = grid
        self._spawner = spawner
        self._score = score
        self._position: Position | None = None

    @property
    def position(self) -> Position | None:
        return self._position

    @property
    def is_placed(self) -> bool:
        return self._position is not None

    def place(self, row: int, col: int) -> None:
        """Put the hunter on an empty cell. Callers check occupancy first."""
        if self._position is not None:
            raise ValueError("hunter already placed")
        self._grid.set_cell(row, col, HUNTER)
        self._position = (row, col)

    def check_move(self, direction: Direction) -> tuple[Position | None, ErrorKind | None]:
        """Return the target of a move, or the reason it is illegal. Never mutates."""
        if self._position is None:
            return None, ErrorKind.NO_HUNTER_PLACED
        target = direction.apply(self._position)
        if not self._grid.in_bounds(*target):
            return None, ErrorKind.OUT_OF_BOUNDS
        if self._grid.cell_at(*target).kind is CellKind.OBSTACLE:
            return None, ErrorKind.OBSTACLE_BLOCKED
        return target, None

    def move(self, direction: Direction) -> MoveResult:
        """Move one cell, collecting any treasure on the target.

        The source cell is emptied before a pickup spawns its obstacle, so
        the spawn may land on the cell the hunter just left.
        """
        target, error = self.check_move(direction)
        if error is not None:
            return MoveResult(error=error)
        assert target is not None and self._position is not None

        self._grid.set_cell(*self._position, EMPTY)
        collected: int | None = None
        spawned_at: Position | None = None
        target_cell = self._grid.cell_at(*target)
        self._grid.set_cell(*target, HUNTER)
        if isinstance(target_cell, Treasure):
            collected = target_cell.value
            self._score.record_pickup(collected)
            spawned_at = self._spawner.place_random()
        self._position = target
        self._score.record_move()
        return MoveResult(position=target, collected_value=collected, spawned_at=spawned_at)

    def can_move(self) -> bool:
        """True if at least one neighbour is in bounds and not an obstacle."""
        if self._position is None:
            return False
        return any(self.check_move(direction)[1] is None for direction in Direction)
