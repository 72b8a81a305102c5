"""
Exceptions raised by the Minesweeper engine.

Only two situations are errors: an invalid board configuration and
coordinates outside the grid. Everything else a player can attempt
(revealing a revealed cell, flagging after the game ended, ...) is a
no-op outcome, not an exception.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MinesweeperError, ValueError):
    """Invalid rows, cols or mine count."""


class OutOfRangeError(MinesweeperError, IndexError):
    """Coordinates outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} grid"
        )
        self.row = row
        self.col = col
