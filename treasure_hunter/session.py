"""Stage machine composing the grid, hunter, spawner and score keeper.

``GameSession`` is the only object a host drives. Every operation either
completes fully or returns a failure result without touching state.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from random import Random

from treasure_hunter.config.types import SessionConfig
from treasure_hunter.domain.cell import Cell, CellKind, Hunter, Obstacle, Treasure
from treasure_hunter.domain.grid import Grid, Position
from treasure_hunter.domain.hunter import Direction, HunterAgent
from treasure_hunter.domain.outcomes import (
    ErrorKind,
    MoveResult,
    PlacementResult,
    TransitionResult,
)
from treasure_hunter.domain.score import ScoreKeeper
from treasure_hunter.domain.snapshot import GameSnapshot
from treasure_hunter.domain.spawner import ObstacleSpawner
from treasure_hunter.domain.stage import Stage
from treasure_hunter.domain.tokens import parse_direction

logger = logging.getLogger(__name__)


class GameSession:
    """One game from setup to end."""

    def __init__(self, config: SessionConfig | None = None, rng: Random | None = None) -> None:
        self.config = config or SessionConfig()
        if rng is None:
            rng = Random(self.config.seed)
        self._grid = Grid(self.config.rows, self.config.cols)
        self._score = ScoreKeeper()
        self._spawner = ObstacleSpawner(self._grid, rng)
        self._hunter = HunterAgent(self._grid, self._spawner, self._score)
        self._stage = Stage.SETUP

    # -- queries -----------------------------------------------------------

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def hunter_position(self) -> Position | None:
        return self._hunter.position

    @property
    def score(self) -> int:
        return self._score.score

    @property
    def rounds(self) -> int:
        return self._score.rounds

    def total_treasures(self) -> int:
        return self._grid.ledger.total()

    def can_move(self) -> bool:
        return self._hunter.can_move()

    def performance_index(self) -> float:
        return self._score.performance_index()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            rows=self._grid.rows,
            cols=self._grid.cols,
            cells=self._grid.rows_view(),
            stage=self._stage,
            hunter_position=self._hunter.position,
            score=self._score.score,
            rounds=self._score.rounds,
            treasure_counts=self._grid.ledger.as_dict(),
            performance_index=self._score.performance_index(),
        )

    # -- setup -------------------------------------------------------------

    def place_object(self, row: int, col: int, cell: Cell) -> PlacementResult:
        """Place a treasure, obstacle or the hunter on an empty cell during Setup.

        Out-of-bounds coordinates raise ``IndexError``; placing ``Empty``
        raises ``ValueError``. Both are caller errors rather than outcomes.
        """
        if not isinstance(cell, (Treasure, Obstacle, Hunter)):
            raise ValueError(f"cannot place {cell!r}; expected Treasure, Obstacle or Hunter")
        if not self._grid.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside the {self.rows}x{self.cols} grid")
        if self._stage is not Stage.SETUP:
            return PlacementResult(error=ErrorKind.INVALID_STAGE)
        if self._grid.cell_at(row, col).kind is not CellKind.EMPTY:
            return PlacementResult(error=ErrorKind.OCCUPIED_CELL)
        if isinstance(cell, Hunter):
            if self._hunter.is_placed:
                return PlacementResult(error=ErrorKind.DUPLICATE_HUNTER)
            self._hunter.place(row, col)
        else:
            self._grid.set_cell(row, col, cell)
        return PlacementResult()

    def end_setup(self) -> TransitionResult:
        """Enter Play; with no treasures on the board, continue straight to End."""
        if self._stage is not Stage.SETUP:
            return TransitionResult(stage=self._stage, error=ErrorKind.INVALID_STAGE)
        if not self._hunter.is_placed:
            return TransitionResult(stage=self._stage, error=ErrorKind.NO_HUNTER_PLACED)
        self._advance(Stage.PLAY)
        if self.total_treasures() == 0:
            self._advance(Stage.END)
        return TransitionResult(stage=self._stage)

    # -- play --------------------------------------------------------------

    def move(self, direction: Direction | str) -> MoveResult:
        """Move the hunter one cell; ends play when treasures run out or it is stuck."""
        parsed = parse_direction(direction)
        if self._stage is not Stage.PLAY:
            return MoveResult(error=ErrorKind.INVALID_STAGE)
        if parsed is None:
            return MoveResult(error=ErrorKind.INVALID_DIRECTION)
        result = self._hunter.move(parsed)
        if not result.ok:
            return result
        if self.total_treasures() == 0 or not self._hunter.can_move():
            self._advance(Stage.END)
            return replace(result, ended_play=True)
        return result

    def end_play(self) -> TransitionResult:
        if self._stage is not Stage.PLAY:
            return TransitionResult(stage=self._stage, error=ErrorKind.INVALID_STAGE)
        self._advance(Stage.END)
        return TransitionResult(stage=self._stage)

    def _advance(self, target: Stage) -> None:
        if not self._stage.can_advance_to(target):
            raise RuntimeError(f"illegal stage transition {self._stage.value} -> {target.value}")
        logger.debug("Stage %s -> %s", self._stage.value, target.value)
        self._stage = target


def initialize(rows: int, cols: int, rng: Random | None = None) -> GameSession:
    """Create a fresh session in Setup with an empty ``rows x cols`` grid."""
    return GameSession(SessionConfig(rows=rows, cols=cols), rng=rng)
