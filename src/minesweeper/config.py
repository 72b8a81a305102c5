"""
Board configuration and difficulty presets.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

from .errors import ConfigurationError


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place. At least one mine and at
            least one safe cell are required.
    """

    rows: int = 10
    cols: int = 10
    mine_count: int = 15

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("rows", "cols", "mine_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(
                value, (int, np.integer)
            ):
                raise ConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
            # Plain ints so size arithmetic cannot overflow.
            object.__setattr__(self, name, int(value))
        if self.rows <= 0 or self.cols <= 0:
            raise ConfigurationError("Board dimensions must be positive")
        if self.mine_count <= 0:
            raise ConfigurationError("Board needs at least one mine")
        max_mines = self.rows * self.cols - 1
        if self.mine_count > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.mine_count

    @classmethod
    def from_difficulty(
        cls, difficulty: Union["Difficulty", str]
    ) -> "BoardConfig":
        """
        Look up the preset for a difficulty.

        Args:
            difficulty: A Difficulty member or its case-insensitive name.

        Returns:
            The preset configuration.
        """
        if isinstance(difficulty, str):
            try:
                difficulty = Difficulty[difficulty.upper()]
            except KeyError:
                raise ConfigurationError(
                    f"Unknown difficulty: {difficulty}"
                ) from None
        return PRESETS[difficulty]


# ============================================================================
# Presets
# ============================================================================

class Difficulty(Enum):
    """Supported difficulty presets."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


EASY = BoardConfig(8, 8, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)

PRESETS = {
    Difficulty.EASY: EASY,
    Difficulty.MEDIUM: MEDIUM,
    Difficulty.HARD: HARD,
}

DEFAULT_CONFIG = BoardConfig()
