"""
Unit tests for Session state machine.

Tests status transitions, terminal reveal-all, the clock and the
remaining flag counter.
"""
import pytest
from minesweeper import (
    BoardGenerator,
    ConfigurationError,
    GameStatus,
    OutOfRangeError,
    Session,
)


# ============================================================================
# Start Tests
# ============================================================================

class TestSessionStart:
    """Test session creation."""

    def test_start_is_playing(self) -> None:
        session = Session.start(8, 8, 10, BoardGenerator(seed=3))
        assert session.status == GameStatus.PLAYING
        assert session.is_playing is True
        assert session.elapsed_seconds == 0
        assert session.flags_remaining == 10
        assert sum(cell.is_mine for _, cell in session.grid.cells()) == 10

    def test_start_without_generator(self) -> None:
        session = Session.start(4, 4, 3)
        assert sum(cell.is_mine for _, cell in session.grid.cells()) == 3

    def test_start_invalid_config_raises_error(self) -> None:
        with pytest.raises(ConfigurationError):
            Session.start(3, 3, 9)


# ============================================================================
# Win/Lose Condition Tests
# ============================================================================

class TestGameEndConditions:
    """Test win and lose conditions."""

    def test_reveal_mine_loses_and_reveals_all(
        self, corner_mine_session: Session
    ) -> None:
        outcome = corner_mine_session.reveal(0, 0)
        assert outcome.hit_mine is True
        assert corner_mine_session.status == GameStatus.LOST
        assert corner_mine_session.is_lost is True
        grid = corner_mine_session.grid
        assert all(cell.is_revealed for _, cell in grid.cells())
        assert len(outcome.changed_cells) == 9

    def test_cascade_to_full_coverage_wins(
        self, corner_mine_session: Session
    ) -> None:
        outcome = corner_mine_session.reveal(2, 2)
        assert outcome.hit_mine is False
        assert corner_mine_session.status == GameStatus.WON
        assert corner_mine_session.is_won is True
        grid = corner_mine_session.grid
        assert all(cell.is_revealed for _, cell in grid.cells())
        assert outcome.changed_cells[-1] == (0, 0)

    def test_revealing_safe_cells_one_by_one_wins(self) -> None:
        session = Session(BoardGenerator.from_mines(2, 2, [(0, 0)]))
        session.reveal(0, 1)
        session.reveal(1, 0)
        assert session.is_playing is True
        session.reveal(1, 1)
        assert session.status == GameStatus.WON
        assert session.grid.cell(0, 0).is_revealed is True

    def test_partial_reveal_keeps_playing(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.reveal(1, 1)
        assert corner_mine_session.status == GameStatus.PLAYING
        assert corner_mine_session.grid.cell(0, 0).is_revealed is False

    def test_flagged_mine_revealed_after_loss(self) -> None:
        session = Session(BoardGenerator.from_mines(2, 2, [(0, 0), (1, 1)]))
        session.toggle_flag(1, 1)
        session.reveal(0, 0)
        assert session.is_lost is True
        assert session.grid.cell(1, 1).is_revealed is True
        assert session.grid.cell(1, 1).is_flagged is True


# ============================================================================
# Terminal State Tests
# ============================================================================

class TestTerminalState:
    """Test that terminal sessions ignore further commands."""

    def test_reveal_after_game_over_is_noop(self) -> None:
        session = Session(BoardGenerator.from_mines(1, 3, [(0, 0)]))
        session.reveal(0, 0)
        outcome = session.reveal(0, 2)
        assert outcome.changed_cells == []
        assert session.status == GameStatus.LOST

    def test_flag_after_game_over_is_noop(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.reveal(2, 2)
        outcome = corner_mine_session.toggle_flag(0, 0)
        assert outcome.changed is False
        assert corner_mine_session.flags_remaining == 1

    def test_tick_stops_after_game_over(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.tick()
        corner_mine_session.reveal(0, 0)
        assert corner_mine_session.tick() == 1
        assert corner_mine_session.elapsed_seconds == 1

    def test_out_of_range_raises_even_after_game_over(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.reveal(0, 0)
        with pytest.raises(OutOfRangeError):
            corner_mine_session.reveal(5, 5)


# ============================================================================
# Clock Tests
# ============================================================================

class TestTick:
    """Test elapsed time tracking."""

    def test_tick_increments_while_playing(
        self, corner_mine_session: Session
    ) -> None:
        assert corner_mine_session.tick() == 1
        assert corner_mine_session.tick() == 2
        assert corner_mine_session.elapsed_seconds == 2


# ============================================================================
# Flag Counter Tests
# ============================================================================

class TestFlagCounter:
    """Test the remaining flag counter."""

    def test_flag_decrements_counter(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.toggle_flag(0, 0)
        assert corner_mine_session.flags_remaining == 0

    def test_flag_round_trip_restores_counter(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.toggle_flag(1, 2)
        corner_mine_session.toggle_flag(1, 2)
        assert corner_mine_session.flags_remaining == 1
        assert corner_mine_session.grid.cell(1, 2).is_flagged is False

    def test_flagged_mine_cannot_be_revealed_until_unflagged(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.toggle_flag(0, 0)
        outcome = corner_mine_session.reveal(0, 0)
        assert outcome.changed_cells == []
        assert corner_mine_session.status == GameStatus.PLAYING

        corner_mine_session.toggle_flag(0, 0)
        corner_mine_session.reveal(0, 0)
        assert corner_mine_session.status == GameStatus.LOST

    def test_over_flagging_goes_negative(
        self, corner_mine_session: Session
    ) -> None:
        """The counter is not clamped at zero."""
        for col in range(3):
            corner_mine_session.toggle_flag(2, col)
        assert corner_mine_session.flags_remaining == -2

    def test_flag_on_revealed_cell_keeps_counter(
        self, corner_mine_session: Session
    ) -> None:
        corner_mine_session.reveal(1, 1)
        corner_mine_session.toggle_flag(1, 1)
        assert corner_mine_session.flags_remaining == 1
