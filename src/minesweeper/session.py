"""
Session state machine for Minesweeper.

A session owns one grid and tracks game status, elapsed time and the
remaining flag counter. PLAYING is the only non-terminal state; once a
session is WON or LOST every further reveal, flag or tick is a no-op.
"""
import logging
from enum import Enum, auto
from typing import Optional

from .config import BoardConfig
from .flags import FlagOutcome, toggle_flag
from .generator import BoardGenerator
from .grid import Grid
from .reveal import RevealOutcome, reveal, reveal_all


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Session Class
# ============================================================================

class Session:
    """
    One game in progress or concluded.

    Attributes:
        grid: The board, owned exclusively by this session.
        status: Current game status.
        elapsed_seconds: Seconds counted by tick() while playing.
        flags_remaining: Mine count minus placed flags. Not clamped, so
            over-flagging drives it negative.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.status = GameStatus.PLAYING
        self.elapsed_seconds = 0
        self.flags_remaining = grid.mine_count

    @classmethod
    def start(
        cls,
        rows: int,
        cols: int,
        mine_count: int,
        generator: Optional[BoardGenerator] = None,
    ) -> "Session":
        """
        Start a session on a freshly generated grid.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        return cls.from_config(BoardConfig(rows, cols, mine_count), generator)

    @classmethod
    def from_config(
        cls,
        config: BoardConfig,
        generator: Optional[BoardGenerator] = None,
    ) -> "Session":
        generator = generator or BoardGenerator()
        session = cls(generator.generate_config(config))
        logger.info(
            "Started %dx%d game with %d mines",
            config.rows, config.cols, config.mine_count,
        )
        return session

    # ========================================================================
    # Commands
    # ========================================================================

    def tick(self) -> int:
        """Advance the clock by one second while playing."""
        if self.is_playing:
            self.elapsed_seconds += 1
        return self.elapsed_seconds

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell and settle the game status.

        Hitting a mine loses; revealing the last safe cell wins. Either way
        the whole grid is revealed and those cells are appended to the
        outcome's changed cells.

        Raises:
            OutOfRangeError: If the position is outside the grid.
        """
        self.grid.check_bounds(row, col)
        if not self.is_playing:
            return RevealOutcome()

        outcome = reveal(self.grid, row, col)
        if outcome.hit_mine:
            self._finish(GameStatus.LOST, outcome)
        elif self._check_win_condition():
            self._finish(GameStatus.WON, outcome)
        return outcome

    def toggle_flag(self, row: int, col: int) -> FlagOutcome:
        """
        Toggle a flag and update the remaining flag counter.

        Raises:
            OutOfRangeError: If the position is outside the grid.
        """
        self.grid.check_bounds(row, col)
        if not self.is_playing:
            cell = self.grid.cell(row, col)
            return FlagOutcome(flagged=cell.is_flagged, changed=False)

        outcome = toggle_flag(self.grid, row, col)
        if outcome.changed:
            self.flags_remaining += -1 if outcome.flagged else 1
            logger.debug(
                "Flag at (%d, %d) -> %s, %d remaining",
                row, col, outcome.flagged, self.flags_remaining,
            )
        return outcome

    def _check_win_condition(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self.grid.count_revealed_safe() == self.grid.safe_cell_count

    def _finish(self, status: GameStatus, outcome: RevealOutcome) -> None:
        self.status = status
        outcome.changed_cells.extend(reveal_all(self.grid))
        logger.info(
            "Game %s after %d seconds", status.name.lower(),
            self.elapsed_seconds,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self.status == GameStatus.LOST

    @property
    def is_over(self) -> bool:
        return not self.is_playing
