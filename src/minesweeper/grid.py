"""
Grid module for Minesweeper game.

The grid is the matrix of cells plus the total mine count. It has no
game rules of its own; generation, reveal and flag logic live in their
own modules and operate on a Grid.
"""
from typing import Iterator, List, Tuple

from .cell import Cell
from .config import BoardConfig
from .errors import OutOfRangeError


Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    A rows x cols matrix of cells.

    Dimensions and mine count are fixed for the lifetime of the grid.
    """

    def __init__(self, config: BoardConfig) -> None:
        """
        Create a grid of blank cells.

        Args:
            config: Validated board configuration.
        """
        self.config = config
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(config.cols)]
            for _ in range(config.rows)
        ]

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self.rows}, cols={self.cols}, "
            f"mine_count={self.mine_count})"
        )

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def safe_cell_count(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.config.safe_cells

    # ========================================================================
    # Cell Access
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row: int, col: int) -> None:
        """Raise OutOfRangeError unless position is within bounds."""
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col, self.rows, self.cols)

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            OutOfRangeError: If the position is outside the grid.
        """
        self.check_bounds(row, col)
        return self._cells[row][col]

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up-to-8 in-bound neighbors.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.in_bounds(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def cells(self) -> Iterator[Tuple[Position, Cell]]:
        """Iterate over (position, cell) pairs in row-major order."""
        for row, cells in enumerate(self._cells):
            for col, cell in enumerate(cells):
                yield (row, col), cell

    # ========================================================================
    # Counting
    # ========================================================================

    def count_revealed_safe(self) -> int:
        """Count revealed cells that are not mines."""
        return sum(
            1 for _, cell in self.cells()
            if cell.is_revealed and not cell.is_mine
        )
