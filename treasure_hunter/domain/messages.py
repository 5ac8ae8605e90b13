"""Player-facing text for each failure reason."""

from __future__ import annotations

from treasure_hunter.domain.outcomes import ErrorKind

MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.OCCUPIED_CELL: "Cannot place object. Cell is already occupied.",
    ErrorKind.DUPLICATE_HUNTER: "Hunter already placed. You can only have one hunter.",
    ErrorKind.NO_HUNTER_PLACED: "You must place a treasure hunter before starting the game.",
    ErrorKind.OUT_OF_BOUNDS: "Invalid move. Try another direction.",
    ErrorKind.OBSTACLE_BLOCKED: "Invalid move. Try another direction.",
    ErrorKind.INVALID_DIRECTION: "Invalid key. Use W, A, S, D to move.",
    ErrorKind.INVALID_STAGE: "That action is not available in the current stage.",
}


def describe(kind: ErrorKind) -> str:
    return MESSAGES[kind]
