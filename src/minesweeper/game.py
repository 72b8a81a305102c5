"""
Game facade: the single entry point a front-end calls.

Every command runs to completion and returns an immutable snapshot; the
facade never pushes notifications. It does no locking, so callers that
deliver tick() from a timer thread must serialize it with user commands.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from .cell import CellView
from .config import DEFAULT_CONFIG, BoardConfig, Difficulty
from .errors import OutOfRangeError
from .generator import BoardGenerator
from .grid import Position
from .session import GameStatus, Session


# ============================================================================
# Snapshots
# ============================================================================

@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of a session's state."""

    rows: int
    cols: int
    mine_count: int
    cells: Tuple[Tuple[CellView, ...], ...]
    status: GameStatus
    elapsed_seconds: int
    flags_remaining: int

    @classmethod
    def of(cls, session: Session) -> "Snapshot":
        grid = session.grid
        cells = tuple(
            tuple(grid.cell(row, col).view() for col in range(grid.cols))
            for row in range(grid.rows)
        )
        return cls(
            rows=grid.rows,
            cols=grid.cols,
            mine_count=grid.mine_count,
            cells=cells,
            status=session.status,
            elapsed_seconds=session.elapsed_seconds,
            flags_remaining=session.flags_remaining,
        )

    def cell(self, row: int, col: int) -> CellView:
        """
        Get the cell view at a position.

        Raises:
            OutOfRangeError: If the position is outside the board.
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfRangeError(row, col, self.rows, self.cols)
        return self.cells[row][col]

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    def observation(self) -> np.ndarray:
        """
        Get the board as an int8 array.

        Returns:
            2D array where -1 = hidden, -2 = flagged, 0-8 = revealed with
            neighbor count, 9 = revealed mine.
        """
        return np.array(
            [[cell.to_observation() for cell in row] for row in self.cells],
            dtype=np.int8,
        )


@dataclass(frozen=True)
class RevealResult:
    snapshot: Snapshot
    hit_mine: bool
    changed_cells: Tuple[Position, ...]


@dataclass(frozen=True)
class FlagResult:
    snapshot: Snapshot
    flagged: bool


ConfigLike = Union[BoardConfig, Difficulty, str, None]


# ============================================================================
# Game Facade
# ============================================================================

class Game:
    """
    Thin command/query surface over a Session.

    Exposes new_game, reveal, toggle_flag, tick and snapshot; nothing
    else mutates the game.
    """

    def __init__(
        self,
        config: ConfigLike = None,
        generator: Optional[BoardGenerator] = None,
    ) -> None:
        """
        Initialize the facade and start the first game.

        Args:
            config: Board configuration, difficulty, or None for the
                default 10x10 board with 15 mines.
            generator: Board generator; a fresh unseeded one by default.
        """
        self.generator = generator or BoardGenerator()
        self.config = _resolve_config(config, DEFAULT_CONFIG)
        self._session = Session.from_config(self.config, self.generator)

    def new_game(self, config: ConfigLike = None) -> Snapshot:
        """
        Discard the current session and start a new one.

        Args:
            config: New configuration, or None to reuse the current one.

        Raises:
            ConfigurationError: If the configuration is invalid. The
                current session is kept in that case.
        """
        config = _resolve_config(config, self.config)
        session = Session.from_config(config, self.generator)
        self.config = config
        self._session = session
        return self.snapshot()

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell.

        Raises:
            OutOfRangeError: If the position is outside the grid.
        """
        outcome = self._session.reveal(row, col)
        return RevealResult(
            snapshot=self.snapshot(),
            hit_mine=outcome.hit_mine,
            changed_cells=tuple(outcome.changed_cells),
        )

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Toggle the flag on a cell.

        Raises:
            OutOfRangeError: If the position is outside the grid.
        """
        outcome = self._session.toggle_flag(row, col)
        return FlagResult(snapshot=self.snapshot(), flagged=outcome.flagged)

    def tick(self) -> int:
        """Advance the game clock by one second; returns elapsed seconds."""
        return self._session.tick()

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self._session)

    @property
    def status(self) -> GameStatus:
        return self._session.status

    @property
    def elapsed_seconds(self) -> int:
        return self._session.elapsed_seconds

    @property
    def flags_remaining(self) -> int:
        return self._session.flags_remaining


def _resolve_config(config: ConfigLike, default: BoardConfig) -> BoardConfig:
    if config is None:
        return default
    if isinstance(config, BoardConfig):
        return config
    return BoardConfig.from_difficulty(config)
