"""Fixed-size cell matrix and the per-value treasure ledger.

Ledger invariant: for every treasure value, ``ledger.count(value)`` equals
the number of ``Treasure`` cells on the grid carrying that value. Only
:class:`Grid` mutates cells, and it updates the ledger in the same call.
"""

from __future__ import annotations

from collections.abc import Iterator

from treasure_hunter.config.constants import TREASURE_VALUES
from treasure_hunter.domain.cell import EMPTY, Cell, CellKind, Treasure

Position = tuple[int, int]
"""Zero-based ``(row, col)`` coordinate."""


class TreasureLedger:
    """Per-value count of treasures currently on the grid."""

    def __init__(self) -> None:
        self._counts: dict[int, int] = {value: 0 for value in TREASURE_VALUES}

    def count(self, value: int) -> int:
        return self._counts[value]

    def total(self) -> int:
        return sum(self._counts.values())

    def as_dict(self) -> dict[int, int]:
        """Return a copy of the counts keyed by treasure value."""
        return dict(self._counts)

    def add(self, value: int) -> None:
        self._counts[value] += 1

    def remove(self, value: int) -> None:
        if self._counts[value] == 0:
            raise ValueError(f"no treasure of value {value} left to remove")
        self._counts[value] -= 1


class Grid:
    """Rectangular ``rows x cols`` matrix of cells, empty at construction."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.rows = rows
        self.cols = cols
        self._cells: list[list[Cell]] = [[EMPTY for _ in range(cols)] for _ in range(rows)]
        self.ledger = TreasureLedger()

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside the {self.rows}x{self.cols} grid")

    def cell_at(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        """Replace the cell at ``(row, col)`` and keep the ledger in step."""
        self._check_bounds(row, col)
        previous = self._cells[row][col]
        if isinstance(previous, Treasure):
            self.ledger.remove(previous.value)
        if isinstance(cell, Treasure):
            self.ledger.add(cell.value)
        self._cells[row][col] = cell

    def positions(self) -> Iterator[Position]:
        """Yield every coordinate in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def positions_of(self, kind: CellKind) -> list[Position]:
        """Return coordinates whose cell has the given kind, in row-major order."""
        return [(r, c) for r, c in self.positions() if self._cells[r][c].kind is kind]

    def empty_positions(self) -> list[Position]:
        return self.positions_of(CellKind.EMPTY)

    def rows_view(self) -> tuple[tuple[Cell, ...], ...]:
        """Immutable copy of the full matrix."""
        return tuple(tuple(row) for row in self._cells)
