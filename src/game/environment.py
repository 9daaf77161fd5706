"""
Gymnasium environment wrapper for the local Minesweeper game.

Provides the step/reset interface the local collaborators drive, with
seeded mine placement through the environment's generator.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .minefield import Minefield, BoardConfig


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper with reveal and flag actions.

    Observation:
        2D int8 array: -1 hidden, -2 flagged, 0-8 adjacent mine count,
        10 revealed mine, 11 the mine that was clicked.

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i // width, i % width);
        the second half toggles a flag on the same cells.

    The solver is not trained against this environment, so every step
    carries zero reward.
    """

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Minefield(self.config)

        self._num_cells = self.config.height * self.config.width
        self.action_space = spaces.Discrete(2 * self._num_cells)
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new game.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Optional dict; "mines" fixes the mine positions.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.reset(rng=self.np_random)
        self._steps = 0

        if options and options.get("mines") is not None:
            self.board.place_mines(options["mines"])

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Clicks the board cannot take (opened cells, or any click after
        the game ended) leave the observation unchanged.

        Args:
            action: Encoded reveal or flag action (see encode_action).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).

        Raises:
            ValueError: If the action is outside the action space.
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action}")

        row, col, flag = self.decode_action(action)
        self._steps += 1

        if flag:
            self.board.flag(row, col)
        else:
            self.board.reveal(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        return observation, 0.0, terminated, False, self._get_info()

    def encode_action(self, row: int, col: int, flag: bool = False) -> int:
        """Convert (row, col, flag) to a flat action index."""
        action = row * self.config.width + col
        return action + self._num_cells if flag else action

    def decode_action(self, action: int) -> Tuple[int, int, bool]:
        """Convert flat action index to (row, col, flag)."""
        action = int(action)
        flag = action >= self._num_cells
        cell = action - self._num_cells if flag else action
        return cell // self.config.width, cell % self.config.width, flag

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "game_state": self.board.game_state.name,
        }
