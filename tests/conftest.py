"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    BoardConfig,
    BoardGenerator,
    Cell,
    Game,
    Grid,
    MinesweeperEnv,
    Session,
)


# ============================================================================
# Helpers
# ============================================================================

class FixedBoardGenerator(BoardGenerator):
    """Generator that always lays mines at the same positions."""

    def __init__(self, mines: Iterable[Tuple[int, int]]) -> None:
        super().__init__(seed=0)
        self.mines = list(mines)

    def generate_config(self, config: BoardConfig) -> Grid:
        return BoardGenerator.from_mines(config.rows, config.cols, self.mines)


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_grid() -> Grid:
    """3x3 grid with a single mine at (0, 0)."""
    return BoardGenerator.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def seeded_generator() -> BoardGenerator:
    """Generator with a fixed seed."""
    return BoardGenerator(seed=1234)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_session(corner_mine_grid: Grid) -> Session:
    """Fresh session on the 3x3 corner-mine grid."""
    return Session(corner_mine_grid)


@pytest.fixture
def corner_mine_game() -> Game:
    """Game facade that always deals the 3x3 corner-mine grid."""
    return Game(BoardConfig(3, 3, 1), FixedBoardGenerator([(0, 0)]))


@pytest.fixture
def seeded_game() -> Game:
    """Game facade on the easy preset with a seeded generator."""
    return Game(BoardConfig(8, 8, 10), BoardGenerator(seed=7))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_env() -> MinesweeperEnv:
    """Environment that always deals the 3x3 corner-mine grid."""
    env = MinesweeperEnv(BoardConfig(3, 3, 1), render_mode="ansi")
    env.game.generator = FixedBoardGenerator([(0, 0)])
    env.reset()
    return env
