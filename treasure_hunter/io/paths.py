"""Path construction helpers for playthrough output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_artifact_path(out_dir: Path, name: Path | None, default: Path) -> Path:
    """Place a user-named artifact inside *out_dir*; ``None`` keeps *default*.

    Names that resolve outside *out_dir* (``..`` segments, absolute paths
    elsewhere) raise :exc:`ValueError`.
    """
    if name is None:
        return default
    target = (out_dir / name).resolve()
    if not target.is_relative_to(out_dir.resolve()):
        raise ValueError(f"artifact path must stay inside {out_dir}: {name}")
    return target


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def move_log_path(out_dir: Path) -> Path:
    """Return path to the move log Parquet file."""
    return logs_dir(out_dir) / "move_log.parquet"


def summary_path(out_dir: Path) -> Path:
    """Return path to the end-of-session summary JSON file."""
    return out_dir / "summary.json"


def board_image_path(out_dir: Path) -> Path:
    """Return path to the rendered final board."""
    return out_dir / "board.png"
