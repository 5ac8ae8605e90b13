"""Buffered Parquet writer for move attempts of one session."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pyarrow as pa
import pyarrow.parquet as pq

from treasure_hunter.config.constants import FLUSH_THRESHOLD
from treasure_hunter.domain.outcomes import MoveResult
from treasure_hunter.domain.stage import Stage
from treasure_hunter.io.schemas import MOVE_LOG_COLUMNS, MOVE_LOG_SCHEMA, MOVE_LOG_SCHEMA_VERSION


class MoveLogRecorder:
    """Accumulate move rows column-wise and flush them to Parquet in batches.

    The file is only created once the first row is flushed, so a session
    with no move attempts leaves no log behind.
    """

    def __init__(
        self, path: Path, session_id: str, flush_threshold: int = FLUSH_THRESHOLD
    ) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.path = Path(path)
        self.session_id = session_id
        self.flush_threshold = flush_threshold
        self._columns: dict[str, list[object]] = {name: [] for name in MOVE_LOG_COLUMNS}
        self._writer: pq.ParquetWriter | None = None
        self._attempts = 0
        self.rows_written = 0

    def record(
        self,
        direction: str,
        result: MoveResult,
        rounds: int,
        score: int,
        stage: Stage,
    ) -> None:
        """Append one move attempt, successful or not."""
        self._attempts += 1
        position = result.position
        spawned = result.spawned_at
        row = {
            "schema_version": MOVE_LOG_SCHEMA_VERSION,
            "session_id": self.session_id,
            "attempt": self._attempts,
            "round": rounds,
            "direction": direction,
            "ok": result.ok,
            "error": result.error.value if result.error is not None else None,
            "row": position[0] if position is not None else None,
            "col": position[1] if position is not None else None,
            "collected_value": result.collected_value,
            "spawn_row": spawned[0] if spawned is not None else None,
            "spawn_col": spawned[1] if spawned is not None else None,
            "score": score,
            "stage": stage.value,
        }
        for name, value in row.items():
            self._columns[name].append(value)
        if len(self._columns["session_id"]) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        """Write buffered rows and clear the in-memory columns."""
        pending = len(self._columns["session_id"])
        if not pending:
            return
        table = pa.Table.from_pydict(self._columns, schema=MOVE_LOG_SCHEMA)
        if self._writer is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._writer = pq.ParquetWriter(self.path, MOVE_LOG_SCHEMA)
        self._writer.write_table(table)
        self.rows_written += pending
        for values in self._columns.values():
            values.clear()

    def close(self) -> None:
        self.flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None

    def __enter__(self) -> MoveLogRecorder:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def read_move_log(path: Path) -> list[dict[str, object]]:
    """Load every row of a move log, ordered by attempt."""
    rows = pq.read_table(path).to_pylist()
    return sorted(rows, key=lambda row: int(row["attempt"]))  # type: ignore[call-overload]
