"""Configuration dataclasses for sessions and scripted playthroughs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from treasure_hunter.config.constants import (
    DEFAULT_COLS,
    DEFAULT_OUT_DIR,
    DEFAULT_ROWS,
    DEFAULT_THEME_NAME,
    THEME_NAMES,
)

__all__ = [
    "PlaythroughConfig",
    "Placement",
    "SessionConfig",
]

Placement = tuple[int, int, str]
"""``(row, col, token)`` where token is ``5``-``8``, ``o`` or ``h``."""


@dataclass(frozen=True)
class SessionConfig:
    """Grid dimensions and obstacle-spawn seed for one session."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ValueError("rows must be >= 1")
        if self.cols < 1:
            raise ValueError("cols must be >= 1")


@dataclass(frozen=True)
class PlaythroughConfig:
    """A scripted session: initial layout, move sequence and output options."""

    session: SessionConfig = field(default_factory=SessionConfig)
    placements: tuple[Placement, ...] = ()
    moves: str = ""
    out_dir: Path = Path(DEFAULT_OUT_DIR)
    session_id: str = "session"
    render: bool = False
    board_image: Path | None = None
    theme: str = DEFAULT_THEME_NAME
    write_log: bool = True

    def __post_init__(self) -> None:
        for placement in self.placements:
            if len(placement) != 3:
                raise ValueError("placements entries must be [row, col, token]")
            row, col, _token = placement
            if not 0 <= row < self.session.rows or not 0 <= col < self.session.cols:
                raise ValueError(f"placement ({row}, {col}) is outside the grid")
        if not self.session_id:
            raise ValueError("session_id must not be empty")
        if self.theme not in THEME_NAMES:
            raise ValueError(f"theme must be one of {', '.join(THEME_NAMES)}")
