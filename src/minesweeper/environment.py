"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of the Game facade.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .console import render as render_text
from .game import Game
from .generator import BoardGenerator
from .session import GameStatus


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine (after the game ends)

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols);
        the remaining actions toggle a flag on cell i - rows * cols.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 15 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.game = Game(self.config, BoardGenerator(rng=self.np_random))
        self._snapshot = self.game.snapshot()

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        self._num_cells = self.config.rows * self.config.cols
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible boards.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game.generator.rng = self.np_random
        self._snapshot = self.game.new_game()
        self._steps = 0

        return self._snapshot.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).

        Raises:
            ValueError: If the action is outside the action space.
        """
        if not self.action_space.contains(action):
            raise ValueError(
                f"Invalid action {action!r} for {self.action_space}"
            )
        self._steps += 1
        is_flag, row, col = self._decode_action(int(action))

        if is_flag:
            reward = self._flag(row, col)
        else:
            reward = self._reveal(row, col)

        observation = self._snapshot.observation()
        terminated = self._snapshot.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        is_flag = action >= self._num_cells
        index = action % self._num_cells
        return is_flag, index // self.config.cols, index % self.config.cols

    def _reveal(self, row: int, col: int) -> float:
        result = self.game.reveal(row, col)
        self._snapshot = result.snapshot

        if not result.changed_cells:
            return -0.1
        if result.snapshot.status == GameStatus.WON:
            return 10.0
        if result.hit_mine:
            return -10.0
        return 1.0

    def _flag(self, row: int, col: int) -> float:
        before = self._snapshot.cell(row, col).is_flagged
        result = self.game.toggle_flag(row, col)
        self._snapshot = result.snapshot
        return 0.0 if result.flagged != before else -0.1

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        snapshot = self._snapshot
        revealed = sum(
            1 for row in snapshot.cells for cell in row
            if cell.is_revealed and not cell.is_mine
        )
        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self.config.safe_cells,
            "game_state": snapshot.status.name,
            "flags_remaining": snapshot.flags_remaining,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self._snapshot)
        if self.render_mode == "human":
            print(render_text(self._snapshot))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Hidden cells can be
            revealed; hidden and flagged cells can be flagged/unflagged.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self._snapshot.is_over:
            return mask
        for row, cells in enumerate(self._snapshot.cells):
            for col, cell in enumerate(cells):
                if cell.is_revealed:
                    continue
                index = row * self.config.cols + col
                mask[index] = not cell.is_flagged
                mask[self._num_cells + index] = True
        return mask
