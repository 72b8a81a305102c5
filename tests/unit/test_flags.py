"""
Unit tests for flag toggling.
"""
import pytest
from minesweeper import Grid, OutOfRangeError, reveal, toggle_flag


class TestToggleFlag:
    """Test flagging behavior on a grid."""

    def test_flag_hidden_cell(self, corner_mine_grid: Grid) -> None:
        outcome = toggle_flag(corner_mine_grid, 0, 0)
        assert outcome.flagged is True
        assert outcome.changed is True
        assert corner_mine_grid.cell(0, 0).is_flagged is True

    def test_flag_round_trip(self, corner_mine_grid: Grid) -> None:
        toggle_flag(corner_mine_grid, 2, 2)
        outcome = toggle_flag(corner_mine_grid, 2, 2)
        assert outcome.flagged is False
        assert outcome.changed is True
        assert corner_mine_grid.cell(2, 2).is_hidden is True

    def test_flag_revealed_cell_is_noop(self, corner_mine_grid: Grid) -> None:
        reveal(corner_mine_grid, 1, 1)
        outcome = toggle_flag(corner_mine_grid, 1, 1)
        assert outcome.flagged is False
        assert outcome.changed is False
        assert corner_mine_grid.cell(1, 1).is_flagged is False

    def test_out_of_range_raises_error(self, corner_mine_grid: Grid) -> None:
        with pytest.raises(OutOfRangeError):
            toggle_flag(corner_mine_grid, 0, -1)
        assert not any(cell.is_flagged for _, cell in corner_mine_grid.cells())
