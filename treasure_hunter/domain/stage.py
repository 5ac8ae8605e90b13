"""Coarse game phase and its legal forward transitions."""

from __future__ import annotations

from enum import Enum


class Stage(Enum):
    """Session phase. Transitions only ever move forward."""

    SETUP = "setup"
    PLAY = "play"
    END = "end"

    def can_advance_to(self, target: Stage) -> bool:
        return _NEXT.get(self) is target


_NEXT: dict[Stage, Stage] = {
    Stage.SETUP: Stage.PLAY,
    Stage.PLAY: Stage.END,
}
