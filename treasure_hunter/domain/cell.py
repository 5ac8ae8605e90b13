"""Cell contents: a closed set of four variants.

Every grid coordinate holds exactly one cell instance. Cells are frozen,
so the grid can hand them out without exposing its own storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from treasure_hunter.config.constants import TREASURE_VALUES


class CellKind(Enum):
    """Tag shared by the four cell variants."""

    EMPTY = "empty"
    OBSTACLE = "obstacle"
    TREASURE = "treasure"
    HUNTER = "hunter"


@dataclass(frozen=True)
class Empty:
    kind: ClassVar[CellKind] = CellKind.EMPTY

    @property
    def label(self) -> str:
        return "."


@dataclass(frozen=True)
class Obstacle:
    kind: ClassVar[CellKind] = CellKind.OBSTACLE

    @property
    def label(self) -> str:
        return "O"


@dataclass(frozen=True)
class Treasure:
    """A collectable treasure worth ``value`` points."""

    value: int
    kind: ClassVar[CellKind] = CellKind.TREASURE

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or self.value not in TREASURE_VALUES:
            valid = ", ".join(str(v) for v in TREASURE_VALUES)
            raise ValueError(f"treasure value must be one of {valid}, got {self.value!r}")

    @property
    def label(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Hunter:
    kind: ClassVar[CellKind] = CellKind.HUNTER

    @property
    def label(self) -> str:
        return "H"


Cell = Empty | Obstacle | Treasure | Hunter
"""Union of the four cell variants."""

EMPTY = Empty()
OBSTACLE = Obstacle()
HUNTER = Hunter()
