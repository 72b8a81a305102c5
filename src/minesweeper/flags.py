"""
Flag toggling.
"""
from dataclasses import dataclass

from .grid import Grid


@dataclass
class FlagOutcome:
    """
    Result of a flag toggle.

    Attributes:
        flagged: Whether the cell is flagged after the call.
        changed: Whether the flag actually flipped.
    """

    flagged: bool = False
    changed: bool = False


def toggle_flag(grid: Grid, row: int, col: int) -> FlagOutcome:
    """
    Toggle the flag on a cell.

    Revealed cells cannot be flagged; toggling one is a no-op.

    Raises:
        OutOfRangeError: If the position is outside the grid.
    """
    cell = grid.cell(row, col)
    changed = cell.toggle_flag()
    return FlagOutcome(flagged=cell.is_flagged, changed=changed)
