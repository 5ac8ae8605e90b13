"""Domain layer: cells, grid, hunter, scoring, stages and typed snapshots."""

from treasure_hunter.domain.cell import Cell, CellKind, Empty, Hunter, Obstacle, Treasure
from treasure_hunter.domain.grid import Grid, Position, TreasureLedger
from treasure_hunter.domain.hunter import Direction, HunterAgent
from treasure_hunter.domain.messages import describe
from treasure_hunter.domain.outcomes import (
    ErrorKind,
    MoveResult,
    PlacementResult,
    TransitionResult,
)
from treasure_hunter.domain.score import ScoreKeeper, performance_index
from treasure_hunter.domain.snapshot import GameSnapshot
from treasure_hunter.domain.spawner import ObstacleSpawner
from treasure_hunter.domain.stage import Stage
from treasure_hunter.domain.tokens import parse_direction, parse_object_token

__all__ = [
    "Cell",
    "CellKind",
    "Direction",
    "Empty",
    "ErrorKind",
    "GameSnapshot",
    "Grid",
    "Hunter",
    "HunterAgent",
    "MoveResult",
    "Obstacle",
    "ObstacleSpawner",
    "PlacementResult",
    "Position",
    "ScoreKeeper",
    "Stage",
    "TransitionResult",
    "Treasure",
    "TreasureLedger",
    "describe",
    "parse_direction",
    "parse_object_token",
    "performance_index",
]
