"""Parse the short text tokens a host uses for placements and moves."""

from __future__ import annotations

from treasure_hunter.config.constants import (
    DIRECTION_KEYS,
    HUNTER_TOKEN,
    OBSTACLE_TOKEN,
    TREASURE_VALUES,
)
from treasure_hunter.domain.cell import HUNTER, OBSTACLE, Cell, Treasure
from treasure_hunter.domain.hunter import Direction


def parse_object_token(token: str) -> Cell:
    """Map ``5``-``8``, ``o`` or ``h`` to the cell it places."""
    normalized = token.strip().lower()
    if normalized == OBSTACLE_TOKEN:
        return OBSTACLE
    if normalized == HUNTER_TOKEN:
        return HUNTER
    if normalized.isdigit() and int(normalized) in TREASURE_VALUES:
        return Treasure(int(normalized))
    valid = ", ".join(str(v) for v in TREASURE_VALUES)
    raise ValueError(f"object token must be one of {valid}, {OBSTACLE_TOKEN} or {HUNTER_TOKEN}")


def parse_direction(token: object) -> Direction | None:
    """Resolve a ``Direction``, a WASD key or a direction name; ``None`` if unrecognized."""
    if isinstance(token, Direction):
        return token
    if not isinstance(token, str):
        return None
    normalized = token.strip().lower()
    name = DIRECTION_KEYS.get(normalized, normalized)
    try:
        return Direction[name.upper()]
    except KeyError:
        return None
