"""Turn-based treasure hunt on a rectangular grid.

The public entry point is :func:`initialize`, which returns a
:class:`GameSession` in the Setup stage.
"""

from treasure_hunter.domain import (
    Cell,
    CellKind,
    Direction,
    Empty,
    ErrorKind,
    GameSnapshot,
    Hunter,
    MoveResult,
    Obstacle,
    PlacementResult,
    Stage,
    TransitionResult,
    Treasure,
)
from treasure_hunter.session import GameSession, initialize

__all__ = [
    "Cell",
    "CellKind",
    "Direction",
    "Empty",
    "ErrorKind",
    "GameSession",
    "GameSnapshot",
    "Hunter",
    "MoveResult",
    "Obstacle",
    "PlacementResult",
    "Stage",
    "TransitionResult",
    "Treasure",
    "initialize",
]
