"""
Board generation for Minesweeper.

Places mines by rejection sampling and derives the neighbor mine count of
every safe cell.
"""
import logging
from typing import Iterable, Optional

import numpy as np

from .config import BoardConfig
from .errors import ConfigurationError
from .grid import Grid, Position


logger = logging.getLogger(__name__)


# ============================================================================
# Board Generator
# ============================================================================

class BoardGenerator:
    """
    Produces freshly mined grids.

    The random source is a numpy Generator passed in by the caller, so a
    seeded generator yields the same boards every run.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            rng: Random generator to draw mine positions from.
            seed: Seed for a new generator when rng is not given.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self, rows: int, cols: int, mine_count: int) -> Grid:
        """
        Generate a grid with randomly placed mines.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mine_count: Number of mines, 0 < mine_count < rows * cols.

        Returns:
            Grid with exactly mine_count mines and neighbor counts set.

        Raises:
            ConfigurationError: If the dimensions or mine count are invalid.
        """
        return self.generate_config(BoardConfig(rows, cols, mine_count))

    def generate_config(self, config: BoardConfig) -> Grid:
        """Generate a grid for an already validated configuration."""
        grid = Grid(config)
        self._place_mines(grid)
        count_neighbor_mines(grid)
        logger.debug("Generated %r", grid)
        return grid

    def _place_mines(self, grid: Grid) -> None:
        """Mine random cells, skipping already mined ones, until done."""
        mines_placed = 0
        while mines_placed < grid.mine_count:
            row = int(self.rng.integers(grid.rows))
            col = int(self.rng.integers(grid.cols))
            cell = grid.cell(row, col)
            if not cell.is_mine:
                cell.is_mine = True
                mines_placed += 1

    @staticmethod
    def from_mines(rows: int, cols: int, mines: Iterable[Position]) -> Grid:
        """
        Build a grid with mines at explicit positions.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mines: (row, col) positions of the mines.

        Returns:
            Grid with those mines and neighbor counts set.

        Raises:
            ConfigurationError: If a position repeats or lies outside the
                grid, or the mine count is not valid for the dimensions.
        """
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise ConfigurationError("Duplicate mine positions")
        grid = Grid(BoardConfig(rows, cols, len(positions)))
        for row, col in positions:
            if not grid.in_bounds(row, col):
                raise ConfigurationError(
                    f"Mine position ({row}, {col}) is outside the grid"
                )
            grid.cell(row, col).is_mine = True
        count_neighbor_mines(grid)
        return grid


# ============================================================================
# Neighbor Counts
# ============================================================================

def count_neighbor_mines(grid: Grid) -> None:
    """Store the adjacent mine count on every non-mine cell."""
    for (row, col), cell in grid.cells():
        if cell.is_mine:
            continue
        cell.neighbor_mine_count = sum(
            1 for neighbor_row, neighbor_col in grid.neighbors(row, col)
            if grid.cell(neighbor_row, neighbor_col).is_mine
        )
