"""Artifact layer: Parquet schemas, output paths and the move-log writer."""

from treasure_hunter.io.move_log import MoveLogRecorder, read_move_log
from treasure_hunter.io.paths import (
    board_image_path,
    logs_dir,
    move_log_path,
    resolve_artifact_path,
    summary_path,
)
from treasure_hunter.io.schemas import MOVE_LOG_COLUMNS, MOVE_LOG_SCHEMA, MOVE_LOG_SCHEMA_VERSION

__all__ = [
    "MOVE_LOG_COLUMNS",
    "MOVE_LOG_SCHEMA",
    "MOVE_LOG_SCHEMA_VERSION",
    "MoveLogRecorder",
    "board_image_path",
    "logs_dir",
    "move_log_path",
    "read_move_log",
    "resolve_artifact_path",
    "summary_path",
]
