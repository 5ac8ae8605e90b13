"""Cumulative score, round counter and the derived performance index."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from treasure_hunter.config.constants import PERFORMANCE_INDEX_PLACES

_QUANTUM = Decimal(1).scaleb(-PERFORMANCE_INDEX_PLACES)


def performance_index(score: int, rounds: int) -> float:
    """Return ``score / rounds`` rounded half-up to two decimals, or 0.0 with no rounds.

    Rounding is applied to the exact rational value, so ``1/8 -> 0.13`` and
    ``5/8 -> 0.63`` regardless of binary floating-point representation.
    """
    if rounds == 0:
        return 0.0
    exact = Decimal(score) / Decimal(rounds)
    # Terminating quotients are exact here; non-terminating ones never sit on a half.
    return float(exact.quantize(_QUANTUM, rounding=ROUND_HALF_UP))


class ScoreKeeper:
    """Owns the score and the count of successful moves."""

    def __init__(self) -> None:
        self.score = 0
        self.rounds = 0

    def record_pickup(self, value: int) -> None:
        if value < 0:
            raise ValueError("treasure value must be >= 0")
        self.score += value

    def record_move(self) -> None:
        self.rounds += 1

    def performance_index(self) -> float:
        return performance_index(self.score, self.rounds)
