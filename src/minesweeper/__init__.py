"""
Minesweeper engine package.

Provides the board engine (generation, reveal, flags, session state) and
the Game facade front-ends call.
"""
from .cell import Cell, CellView
from .config import (
    BoardConfig,
    Difficulty,
    DEFAULT_CONFIG,
    EASY,
    MEDIUM,
    HARD,
)
from .errors import ConfigurationError, MinesweeperError, OutOfRangeError
from .grid import Grid
from .generator import BoardGenerator
from .reveal import RevealOutcome, reveal, reveal_all
from .flags import FlagOutcome, toggle_flag
from .session import GameStatus, Session
from .game import FlagResult, Game, RevealResult, Snapshot
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellView",
    "BoardConfig",
    "Difficulty",
    "DEFAULT_CONFIG",
    "EASY",
    "MEDIUM",
    "HARD",
    "ConfigurationError",
    "MinesweeperError",
    "OutOfRangeError",
    "Grid",
    "BoardGenerator",
    "RevealOutcome",
    "reveal",
    "reveal_all",
    "FlagOutcome",
    "toggle_flag",
    "GameStatus",
    "Session",
    "FlagResult",
    "Game",
    "RevealResult",
    "Snapshot",
    "MinesweeperEnv",
]
