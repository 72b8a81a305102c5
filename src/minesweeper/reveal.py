"""
Reveal logic: single-cell reveal, flood fill and terminal reveal-all.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from .grid import Grid, Position


logger = logging.getLogger(__name__)


@dataclass
class RevealOutcome:
    """
    Result of a reveal.

    Attributes:
        changed_cells: Positions whose is_revealed flag flipped, in the
            order they were revealed. Empty for a no-op.
        hit_mine: Whether the targeted cell was a mine.
    """

    changed_cells: List[Position] = field(default_factory=list)
    hit_mine: bool = False

    @property
    def is_noop(self) -> bool:
        return not self.changed_cells


def reveal(grid: Grid, row: int, col: int) -> RevealOutcome:
    """
    Reveal a cell, cascading over empty regions.

    Revealing a cell with no neighboring mines also reveals its
    neighbors; neighbors that are empty themselves keep the cascade
    going. The cascade runs on an explicit stack, and a cell's
    is_revealed flag doubles as its visited marker, so each cell is
    pushed at most once.

    Args:
        grid: Grid to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        RevealOutcome. Revealing an already revealed or a flagged cell is
        a no-op with no changed cells.

    Raises:
        OutOfRangeError: If the position is outside the grid.
    """
    cell = grid.cell(row, col)
    if not cell.reveal():
        return RevealOutcome()

    outcome = RevealOutcome(changed_cells=[(row, col)])
    if cell.is_mine:
        outcome.hit_mine = True
        return outcome

    if cell.is_empty:
        _flood_fill(grid, row, col, outcome.changed_cells)
        logger.debug(
            "Cascade from (%d, %d) revealed %d cells",
            row, col, len(outcome.changed_cells),
        )
    return outcome


def _flood_fill(
    grid: Grid, row: int, col: int, changed: List[Position]
) -> None:
    """Reveal the empty region around an already revealed empty cell."""
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        for neighbor_row, neighbor_col in grid.neighbors(
            current_row, current_col
        ):
            neighbor = grid.cell(neighbor_row, neighbor_col)
            if neighbor.is_mine or not neighbor.reveal():
                continue
            changed.append((neighbor_row, neighbor_col))
            if neighbor.is_empty:
                stack.append((neighbor_row, neighbor_col))


def reveal_all(grid: Grid) -> List[Position]:
    """
    Reveal every hidden cell, flagged or not.

    Returns:
        Positions that were hidden before the call.
    """
    return [
        position for position, cell in grid.cells() if cell.force_reveal()
    ]
