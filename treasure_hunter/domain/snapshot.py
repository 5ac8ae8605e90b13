"""Read-only view of a session at one point in time."""

from __future__ import annotations

from dataclasses import dataclass

from treasure_hunter.domain.cell import Cell, CellKind, Treasure
from treasure_hunter.domain.stage import Stage


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of the grid, stage, hunter position and counters."""

    rows: int
    cols: int
    cells: tuple[tuple[Cell, ...], ...]
    stage: Stage
    hunter_position: tuple[int, int] | None
    score: int
    rounds: int
    treasure_counts: dict[int, int]
    performance_index: float

    @property
    def total_treasures(self) -> int:
        return sum(self.treasure_counts.values())

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def positions_of(self, kind: CellKind) -> list[tuple[int, int]]:
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell.kind is kind
        ]

    def render_text(self) -> str:
        """ASCII board: ``.`` empty, ``O`` obstacle, ``H`` hunter, digit for treasure."""
        return "\n".join(" ".join(cell.label for cell in row) for row in self.cells)

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly representation."""
        grid: list[list[dict[str, object]]] = []
        for row in self.cells:
            out_row: list[dict[str, object]] = []
            for cell in row:
                entry: dict[str, object] = {"type": cell.kind.value}
                if isinstance(cell, Treasure):
                    entry["value"] = cell.value
                out_row.append(entry)
            grid.append(out_row)
        return {
            "rows": self.rows,
            "cols": self.cols,
            "stage": self.stage.value,
            "hunter_position": (
                list(self.hunter_position) if self.hunter_position is not None else None
            ),
            "score": self.score,
            "rounds": self.rounds,
            "treasure_counts": {str(k): v for k, v in self.treasure_counts.items()},
            "total_treasures": self.total_treasures,
            "performance_index": self.performance_index,
            "grid": grid,
        }
