"""Parquet schema for the per-session move log."""

from __future__ import annotations

import pyarrow as pa

MOVE_LOG_SCHEMA_VERSION = 1

MOVE_LOG_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("session_id", pa.string()),
        ("attempt", pa.int64()),
        ("round", pa.int64()),
        ("direction", pa.string()),
        ("ok", pa.bool_()),
        ("error", pa.string()),
        ("row", pa.int64()),
        ("col", pa.int64()),
        ("collected_value", pa.int64()),
        ("spawn_row", pa.int64()),
        ("spawn_col", pa.int64()),
        ("score", pa.int64()),
        ("stage", pa.string()),
    ]
)

MOVE_LOG_COLUMNS: list[str] = MOVE_LOG_SCHEMA.names
"""Column order shared by the recorder buffers and the schema."""
