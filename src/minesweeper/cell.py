"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/number) and their reveal/flag flags.
"""
from dataclasses import dataclass


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN = -1
FLAGGED = -2
MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are mutated in place by the reveal and flag operations and are
    never replaced individually.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether this cell has been revealed.
        is_flagged: Whether the player has flagged this cell.
        neighbor_mine_count: Count of mines in neighboring cells (0-8).
            Fixed when the grid is generated; left at 0 for mines.
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mine_count: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell through normal play.

        Returns:
            True if the cell was revealed, False if it was already
            revealed or is flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def force_reveal(self) -> bool:
        """
        Reveal this cell regardless of its flag (terminal reveal-all).

        Returns:
            True if the cell was hidden before the call.
        """
        if self.is_revealed:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def is_empty(self) -> bool:
        """Check if cell is a safe cell with no neighboring mines."""
        return not self.is_mine and self.neighbor_mine_count == 0

    def view(self) -> "CellView":
        """Return an immutable copy of this cell."""
        return CellView(
            is_mine=self.is_mine,
            is_revealed=self.is_revealed,
            is_flagged=self.is_flagged,
            neighbor_mine_count=self.neighbor_mine_count,
        )


@dataclass(frozen=True)
class CellView:
    """Read-only copy of a cell, handed out in snapshots."""

    is_mine: bool
    is_revealed: bool
    is_flagged: bool
    neighbor_mine_count: int

    def to_observation(self) -> int:
        """
        Convert cell to an integer code.

        Returns:
            -1: Hidden cell
            -2: Flagged (unrevealed) cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine
        """
        if not self.is_revealed:
            return FLAGGED if self.is_flagged else HIDDEN
        if self.is_mine:
            return MINE
        return self.neighbor_mine_count
