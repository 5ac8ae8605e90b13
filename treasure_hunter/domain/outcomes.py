"""Error kinds and result containers returned by mutating operations.

Normal misuse never raises: every mutating call returns one of the result
dataclasses below, with ``error`` set to an :class:`ErrorKind` on failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from treasure_hunter.domain.stage import Stage


class ErrorKind(Enum):
    """Recoverable failure reasons."""

    OCCUPIED_CELL = "occupied_cell"
    DUPLICATE_HUNTER = "duplicate_hunter"
    NO_HUNTER_PLACED = "no_hunter_placed"
    OUT_OF_BOUNDS = "out_of_bounds"
    OBSTACLE_BLOCKED = "obstacle_blocked"
    INVALID_DIRECTION = "invalid_direction"
    INVALID_STAGE = "invalid_stage"


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of one placement request."""

    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of an explicit stage-transition request."""

    stage: Stage
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one move request.

    On success, ``collected_value`` is the value of the treasure picked up
    (``None`` if the target was empty), ``spawned_at`` is the coordinate of
    the obstacle spawned by that pickup (``None`` if nothing spawned) and
    ``ended_play`` tells whether this move finished the Play stage.
    """

    error: ErrorKind | None = None
    position: tuple[int, int] | None = None
    collected_value: int | None = None
    spawned_at: tuple[int, int] | None = None
    ended_play: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None
