"""Tests for treasure_hunter.session: stage machine, scenarios and invariants."""

from __future__ import annotations

from random import Random

import pytest

from treasure_hunter import initialize
from treasure_hunter.config.types import SessionConfig
from treasure_hunter.domain.cell import HUNTER, OBSTACLE, CellKind, Empty, Hunter, Treasure
from treasure_hunter.domain.hunter import Direction
from treasure_hunter.domain.outcomes import ErrorKind
from treasure_hunter.domain.score import performance_index
from treasure_hunter.domain.snapshot import GameSnapshot
from treasure_hunter.domain.stage import Stage
from treasure_hunter.session import GameSession

_STAGE_ORDER = {Stage.SETUP: 0, Stage.PLAY: 1, Stage.END: 2}


def _assert_invariants(snapshot: GameSnapshot) -> None:
    treasure_cells = [
        cell for row in snapshot.cells for cell in row if isinstance(cell, Treasure)
    ]
    for value, count in snapshot.treasure_counts.items():
        assert count == sum(1 for cell in treasure_cells if cell.value == value)
    assert snapshot.total_treasures == len(treasure_cells)
    hunters = snapshot.positions_of(CellKind.HUNTER)
    assert len(hunters) <= 1
    if snapshot.hunter_position is None:
        assert hunters == []
    else:
        assert hunters == [snapshot.hunter_position]


class TestInitialize:
    def test_fresh_session(self) -> None:
        session = initialize(4, 6)
        snap = session.snapshot()
        assert (snap.rows, snap.cols) == (4, 6)
        assert snap.stage is Stage.SETUP
        assert snap.hunter_position is None
        assert (snap.score, snap.rounds) == (0, 0)
        assert snap.treasure_counts == {5: 0, 6: 0, 7: 0, 8: 0}
        assert snap.performance_index == 0.0
        assert all(isinstance(cell, Empty) for row in snap.cells for cell in row)

    def test_rejects_bad_dimensions(self) -> None:
        with pytest.raises(ValueError):
            initialize(0, 5)

    def test_config_seed_drives_spawns(self) -> None:
        positions = []
        for _ in range(2):
            session = GameSession(SessionConfig(rows=5, cols=5, seed=11))
            session.place_object(0, 0, Hunter())
            session.place_object(0, 1, Treasure(5))
            session.place_object(4, 4, Treasure(6))
            session.end_setup()
            positions.append(session.move("d").spawned_at)
        assert positions[0] == positions[1]


class TestPlacement:
    def test_place_treasure_updates_counts(self) -> None:
        session = initialize(3, 3)
        assert session.place_object(1, 1, Treasure(6)).ok
        assert session.snapshot().treasure_counts[6] == 1

    def test_place_hunter_records_position(self) -> None:
        session = initialize(3, 3)
        assert session.place_object(2, 0, Hunter()).ok
        assert session.hunter_position == (2, 0)

    def test_occupied_cell(self) -> None:
        """Placing a treasure on an occupied cell fails and leaves counts unchanged."""
        session = initialize(3, 3)
        session.place_object(1, 1, Treasure(5))
        before = session.snapshot()
        result = session.place_object(1, 1, Treasure(8))
        assert result.error is ErrorKind.OCCUPIED_CELL
        assert session.snapshot() == before
        assert session.snapshot().treasure_counts == {5: 1, 6: 0, 7: 0, 8: 0}

    def test_duplicate_hunter(self) -> None:
        session = initialize(3, 3)
        session.place_object(0, 0, Hunter())
        before = session.snapshot()
        result = session.place_object(2, 2, Hunter())
        assert result.error is ErrorKind.DUPLICATE_HUNTER
        assert session.snapshot() == before

    def test_occupied_takes_precedence_over_duplicate(self) -> None:
        session = initialize(3, 3)
        session.place_object(0, 0, Hunter())
        assert session.place_object(0, 0, Hunter()).error is ErrorKind.OCCUPIED_CELL

    def test_out_of_bounds_is_caller_error(self) -> None:
        session = initialize(3, 3)
        with pytest.raises(IndexError):
            session.place_object(3, 0, OBSTACLE)

    def test_placing_empty_is_caller_error(self) -> None:
        session = initialize(3, 3)
        with pytest.raises(ValueError):
            session.place_object(0, 0, Empty())

    def test_placement_outside_setup(self) -> None:
        session = initialize(3, 3)
        session.place_object(0, 0, HUNTER)
        session.place_object(2, 2, Treasure(5))
        session.end_setup()
        before = session.snapshot()
        assert session.place_object(1, 1, OBSTACLE).error is ErrorKind.INVALID_STAGE
        assert session.snapshot() == before


class TestStageTransitions:
    def test_end_setup_without_hunter(self) -> None:
        session = initialize(5, 5)
        session.place_object(1, 1, Treasure(5))
        result = session.end_setup()
        assert result.error is ErrorKind.NO_HUNTER_PLACED
        assert session.stage is Stage.SETUP

    def test_end_setup_enters_play(self) -> None:
        session = initialize(5, 5)
        session.place_object(0, 0, HUNTER)
        session.place_object(3, 3, Treasure(7))
        result = session.end_setup()
        assert result.ok
        assert result.stage is Stage.PLAY
        assert session.stage is Stage.PLAY

    def test_no_treasures_cascades_to_end(self) -> None:
        session = initialize(5, 5)
        session.place_object(2, 2, HUNTER)
        result = session.end_setup()
        assert result.ok
        assert result.stage is Stage.END
        assert session.snapshot().stage is Stage.END

    def test_end_setup_twice(self) -> None:
        session = initialize(5, 5)
        session.place_object(2, 2, HUNTER)
        session.place_object(0, 0, Treasure(5))
        session.end_setup()
        assert session.end_setup().error is ErrorKind.INVALID_STAGE
        assert session.stage is Stage.PLAY

    def test_end_play(self) -> None:
        session = initialize(5, 5)
        session.place_object(2, 2, HUNTER)
        session.place_object(0, 0, Treasure(5))
        session.end_setup()
        result = session.end_play()
        assert result.ok and result.stage is Stage.END

    def test_end_play_outside_play(self) -> None:
        session = initialize(5, 5)
        assert session.end_play().error is ErrorKind.INVALID_STAGE
        assert session.stage is Stage.SETUP

    def test_nothing_leaves_end(self) -> None:
        session = initialize(3, 3)
        session.place_object(1, 1, HUNTER)
        session.end_setup()
        assert session.stage is Stage.END
        frozen = session.snapshot()
        assert session.end_setup().error is ErrorKind.INVALID_STAGE
        assert session.end_play().error is ErrorKind.INVALID_STAGE
        assert session.move(Direction.UP).error is ErrorKind.INVALID_STAGE
        assert session.place_object(0, 0, OBSTACLE).error is ErrorKind.INVALID_STAGE
        assert session.snapshot() == frozen


class TestMove:
    def _play_session(self) -> GameSession:
        session = initialize(5, 5, rng=Random(0))
        session.place_object(2, 2, HUNTER)
        session.place_object(2, 3, OBSTACLE)
        session.place_object(4, 4, Treasure(8))
        session.end_setup()
        return session

    def test_move_in_setup_is_invalid_stage(self) -> None:
        session = initialize(3, 3)
        session.place_object(0, 0, HUNTER)
        assert session.move(Direction.RIGHT).error is ErrorKind.INVALID_STAGE

    def test_invalid_direction(self) -> None:
        session = self._play_session()
        before = session.snapshot()
        result = session.move("x")
        assert result.error is ErrorKind.INVALID_DIRECTION
        assert session.snapshot() == before

    @pytest.mark.parametrize(
        ("direction", "error"),
        [("d", ErrorKind.OBSTACLE_BLOCKED), (Direction.RIGHT, ErrorKind.OBSTACLE_BLOCKED)],
    )
    def test_blocked_move_changes_nothing(self, direction: object, error: ErrorKind) -> None:
        session = self._play_session()
        before = session.snapshot()
        assert session.move(direction).error is error  # type: ignore[arg-type]
        assert session.snapshot() == before

    def test_out_of_bounds_changes_nothing(self) -> None:
        session = initialize(3, 3)
        session.place_object(0, 0, HUNTER)
        session.place_object(2, 2, Treasure(5))
        session.end_setup()
        before = session.snapshot()
        assert session.move("w").error is ErrorKind.OUT_OF_BOUNDS
        assert session.move("a").error is ErrorKind.OUT_OF_BOUNDS
        assert session.snapshot() == before

    def test_successful_move_counts_round(self) -> None:
        session = self._play_session()
        result = session.move("w")
        assert result.ok and not result.ended_play
        assert session.hunter_position == (1, 2)
        assert session.rounds == 1
        assert session.score == 0
        assert session.performance_index() == 0.0


class TestScenarios:
    def test_collect_single_treasure(self) -> None:
        """5x5, hunter at (0,0), treasure 5 at (0,1), move right."""
        session = initialize(5, 5, rng=Random(42))
        assert session.place_object(0, 0, Hunter()).ok
        assert session.place_object(0, 1, Treasure(5)).ok
        assert session.end_setup().ok
        before = session.snapshot()
        empty_before = set(before.positions_of(CellKind.EMPTY))

        result = session.move(Direction.RIGHT)

        after = session.snapshot()
        assert result.ok
        assert result.collected_value == 5
        assert after.score == 5
        assert after.rounds == 1
        assert after.hunter_position == (0, 1)
        obstacles = after.positions_of(CellKind.OBSTACLE)
        assert len(obstacles) == 1
        assert obstacles == [result.spawned_at]
        assert obstacles[0] in empty_before | {(0, 0)}
        # Last treasure collected, so play ends.
        assert result.ended_play
        assert after.stage is Stage.END
        assert after.performance_index == 5.0

    def test_boxed_in_after_move_ends_play(self) -> None:
        """The only empty cell is the vacated one, so the spawn seals the hunter in."""
        session = initialize(3, 3, rng=Random(0))
        layout = {
            (0, 0): HUNTER,
            (0, 1): Treasure(5),
            (0, 2): OBSTACLE,
            (1, 0): OBSTACLE,
            (1, 1): OBSTACLE,
            (1, 2): Treasure(6),
            (2, 0): Treasure(7),
            (2, 1): OBSTACLE,
            (2, 2): Treasure(8),
        }
        for (row, col), cell in layout.items():
            assert session.place_object(row, col, cell).ok
        session.end_setup()

        result = session.move("d")

        assert result.ok
        assert result.spawned_at == (0, 0)
        assert result.ended_play
        assert session.can_move() is False
        assert session.total_treasures() == 3
        assert session.stage is Stage.END

    def test_play_continues_while_mobile(self) -> None:
        session = initialize(5, 5, rng=Random(3))
        session.place_object(0, 0, HUNTER)
        session.place_object(0, 1, Treasure(6))
        session.place_object(4, 4, Treasure(7))
        session.end_setup()
        result = session.move("d")
        assert result.ok
        assert not result.ended_play
        assert session.stage is Stage.PLAY
        assert session.total_treasures() == 1


class TestInvariants:
    @pytest.mark.parametrize("seed", range(20))
    def test_random_play_preserves_invariants(self, seed: int) -> None:
        rng = Random(seed)
        rows, cols = rng.randint(1, 6), rng.randint(1, 6)
        session = initialize(rows, cols, rng=Random(seed + 1000))
        tokens: list[object] = [Treasure(v) for v in (5, 6, 7, 8)] + [OBSTACLE, HUNTER]
        for _ in range(rows * cols):
            cell = rng.choice(tokens)
            session.place_object(rng.randrange(rows), rng.randrange(cols), cell)  # type: ignore[arg-type]
            _assert_invariants(session.snapshot())
        session.place_object(rng.randrange(rows), rng.randrange(cols), HUNTER)
        session.end_setup()

        stages = [session.stage]
        last_score = session.score
        for _ in range(60):
            before = session.snapshot()
            result = session.move(rng.choice(list(Direction)))
            after = session.snapshot()
            _assert_invariants(after)
            stages.append(session.stage)
            assert after.score >= last_score
            last_score = after.score
            if result.ok:
                assert after.rounds == before.rounds + 1
            else:
                assert after == before
            assert after.performance_index == performance_index(after.score, after.rounds)
        order = [_STAGE_ORDER[s] for s in stages]
        assert order == sorted(order)
