"""CLI entrypoint for scripted playthroughs.

Reads a layout (grid size, seed, placements) and a move string, drives a
:class:`~treasure_hunter.session.GameSession` through Setup, Play and End,
and writes the move log, a JSON summary and optionally a rendered board.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from treasure_hunter.analysis.reachability import summarize_reachability
from treasure_hunter.config.constants import (
    DEFAULT_COLS,
    DEFAULT_OUT_DIR,
    DEFAULT_ROWS,
    DEFAULT_THEME_NAME,
    THEME_NAMES,
)
from treasure_hunter.config.types import Placement, PlaythroughConfig, SessionConfig
from treasure_hunter.domain.messages import describe
from treasure_hunter.domain.stage import Stage
from treasure_hunter.domain.tokens import parse_object_token
from treasure_hunter.io.move_log import MoveLogRecorder
from treasure_hunter.io.paths import (
    board_image_path,
    move_log_path,
    resolve_artifact_path,
    summary_path,
)
from treasure_hunter.session import GameSession

logger = logging.getLogger(__name__)


class PlaythroughError(RuntimeError):
    """Raised when a scripted layout cannot be set up."""


# ---------------------------------------------------------------------------
# Config resolution helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _parse_placements(raw: object) -> tuple[Placement, ...]:
    """Parse ``[[row, col, token], ...]`` from a config file."""
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ValueError("placements must be a list of [row, col, token] entries")
    placements: list[Placement] = []
    for entry in raw:
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise ValueError("placements entries must be [row, col, token]")
        row = _coerce_int(entry[0], "placement row")
        col = _coerce_int(entry[1], "placement col")
        token = _coerce_str(entry[2], "placement token")
        placements.append((row, col, token))
    return tuple(placements)


def _load_config_file(path: Path) -> dict[str, object]:
    payload = json.loads(Path(path).read_text())
    if not isinstance(payload, dict):
        raise ValueError("config file must contain a JSON object")
    return payload


# ---------------------------------------------------------------------------
# Playthrough
# ---------------------------------------------------------------------------


def setup_session(config: PlaythroughConfig) -> GameSession:
    """Create a session and apply every placement; raises on the first rejection."""
    session = GameSession(config.session)
    for row, col, token in config.placements:
        result = session.place_object(row, col, parse_object_token(token))
        if not result.ok and result.error is not None:
            raise PlaythroughError(f"placement ({row}, {col}, {token!r}): {describe(result.error)}")
    return session


def run_playthrough(config: PlaythroughConfig) -> dict[str, object]:
    """Run one scripted session to the End stage and persist its artifacts."""
    session = setup_session(config)
    transition = session.end_setup()
    if not transition.ok and transition.error is not None:
        raise PlaythroughError(describe(transition.error))

    out_dir = Path(config.out_dir)
    image_path = resolve_artifact_path(out_dir, config.board_image, board_image_path(out_dir))
    out_dir.mkdir(parents=True, exist_ok=True)
    rejected = 0
    recorder = MoveLogRecorder(move_log_path(out_dir), session_id=config.session_id)
    with recorder:
        for key in config.moves:
            if key.isspace():
                continue
            if session.stage is not Stage.PLAY:
                logger.info("Play ended; ignoring remaining moves")
                break
            result = session.move(key)
            if config.write_log:
                recorder.record(key, result, session.rounds, session.score, session.stage)
            if not result.ok and result.error is not None:
                rejected += 1
                logger.warning("Move %r rejected: %s", key, describe(result.error))
            elif result.collected_value is not None:
                logger.info(
                    "Collected %d at %s, obstacle spawned at %s",
                    result.collected_value,
                    result.position,
                    result.spawned_at,
                )
    if session.stage is Stage.PLAY:
        session.end_play()

    snapshot = session.snapshot()
    summary: dict[str, object] = {
        "session_id": config.session_id,
        "rejected_moves": rejected,
        "snapshot": snapshot.to_dict(),
        "reachability": summarize_reachability(snapshot),
    }
    if config.render:
        from treasure_hunter.viz.render import render_board
        from treasure_hunter.viz.theme import get_theme

        rendered = render_board(snapshot, image_path, theme=get_theme(config.theme))
        summary["board_image"] = str(rendered)
    if config.write_log and recorder.rows_written:
        summary["move_log"] = str(move_log_path(out_dir))
    summary_path(out_dir).write_text(json.dumps(summary, indent=2))
    return summary


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a scripted treasure hunt")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON layout/config file (CLI args override file values)",
    )
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--place",
        action="append",
        default=None,
        metavar="ROW,COL,TOKEN",
        help="Placement such as 0,0,h or 2,3,7 (repeatable; replaces file placements)",
    )
    parser.add_argument("--moves", type=str, default=None, help="Move keys, e.g. ddsw")
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--session-id", type=str, default=None)
    parser.add_argument("--render", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--board-image",
        type=Path,
        default=None,
        help="Rendered board file name, relative to --out-dir",
    )
    parser.add_argument("--theme", type=str, choices=list(THEME_NAMES), default=None)
    parser.add_argument("--write-log", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _parse_place_args(raw_places: list[str]) -> tuple[Placement, ...]:
    entries: list[list[str]] = []
    for raw in raw_places:
        parts = [part.strip() for part in raw.split(",")]
        if len(parts) != 3:
            raise ValueError(f"--place expects ROW,COL,TOKEN, got {raw!r}")
        entries.append(parts)
    return _parse_placements(entries)


def build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> PlaythroughConfig:
    """Resolve CLI > file > default into a validated ``PlaythroughConfig``."""
    seed_raw = _get_val(args.seed, "seed", file_cfg, None)
    board_image_raw = _get_val(args.board_image, "board_image", file_cfg, None)
    session = SessionConfig(
        rows=_coerce_int(_get_val(args.rows, "rows", file_cfg, DEFAULT_ROWS), "rows"),
        cols=_coerce_int(_get_val(args.cols, "cols", file_cfg, DEFAULT_COLS), "cols"),
        seed=None if seed_raw is None else _coerce_int(seed_raw, "seed"),
    )
    if args.place is not None:
        placements = _parse_place_args(args.place)
    else:
        placements = _parse_placements(file_cfg.get("placements"))
    return PlaythroughConfig(
        session=session,
        placements=placements,
        moves=_coerce_str(_get_val(args.moves, "moves", file_cfg, ""), "moves"),
        out_dir=Path(
            _coerce_str(_get_val(args.out_dir, "out_dir", file_cfg, DEFAULT_OUT_DIR), "out_dir")
        ),
        session_id=_coerce_str(
            _get_val(args.session_id, "session_id", file_cfg, "session"), "session_id"
        ),
        render=_coerce_bool(_get_val(args.render, "render", file_cfg, False), "render"),
        board_image=(
            None if board_image_raw is None else Path(_coerce_str(board_image_raw, "board_image"))
        ),
        theme=_coerce_str(_get_val(args.theme, "theme", file_cfg, DEFAULT_THEME_NAME), "theme"),
        write_log=_coerce_bool(_get_val(args.write_log, "write_log", file_cfg, True), "write_log"),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: resolve settings, run the playthrough, print the summary."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = _load_config_file(args.config)
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        except ValueError as exc:
            parser.error(str(exc))

    try:
        config = build_config(args, file_cfg)
        summary = run_playthrough(config)
    except (ValueError, PlaythroughError) as exc:
        parser.error(str(exc))

    json.dump(summary, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
