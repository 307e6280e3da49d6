"""
Gymnasium environment wrapper for the minefield board.

Exposes reveal, flag and chord as discrete actions for automated agents.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
from gymnasium import spaces
import numpy as np

from .actions import Action, ActionKind, apply_action
from .board import Board, BoardConfig, GameState
from .errors import MineOpenedError, OutOfBoundsError
from .render import render_board


# Order of the action blocks in the flat action space.
ACTION_KINDS = (ActionKind.REVEAL, ActionKind.FLAG, ActionKind.CHORD)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for the minefield board.

    Observation:
        2D array of shape (width, height) indexed [x, y] where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * width * height. Block
        action // (width * height) selects reveal, flag or chord; the
        remainder i is the cell (i // height, i % height).

    Rewards:
        - +1 per newly revealed cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 8 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board.from_config(self.config)
        self.render_mode = render_mode
        self._cell_count = self.config.width * self.config.height

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.width, self.config.height),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            len(ACTION_KINDS) * self._cell_count
        )

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Generate a fresh board for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(2**32)))
        self.board = Board.from_config(self.config, rng)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        decoded = self.decode_action(action)
        self._steps += 1
        reward = self._apply(decoded)

        observation = self.board.get_observation()
        terminated = self.board.game_state != GameState.PLAYING
        return observation, reward, terminated, False, self._get_info()

    def decode_action(self, action: int) -> Action:
        """
        Convert a flat action index to an Action.

        Raises:
            ValueError: If the index is outside the action space.
        """
        action = int(action)
        if not self.action_space.contains(action):
            raise ValueError(f"Action {action} outside action space")
        block, index = divmod(action, self._cell_count)
        x, y = divmod(index, self.config.height)
        return Action(ACTION_KINDS[block], x, y)

    def encode_action(self, action: Action) -> int:
        """Convert an Action to its flat action index."""
        block = ACTION_KINDS.index(action.kind)
        return block * self._cell_count + action.x * self.config.height + action.y

    def _apply(self, action: Action) -> float:
        """Apply an action and compute its reward."""
        if self.board.is_lost():
            return -0.1
        flagged_before = self.board.flag_count
        try:
            revealed = apply_action(self.board, action)
        except MineOpenedError:
            return -10.0
        except OutOfBoundsError:
            return -0.1

        if revealed == 0 and self.board.flag_count == flagged_before:
            return -0.1
        if self.board.is_won():
            return 10.0
        return float(revealed)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        observation = self.board.get_observation()
        return {
            "steps": self._steps,
            "revealed": int(
                np.count_nonzero((observation >= 0) & (observation <= 8))
            ),
            "flags": self.board.flag_count,
            "total_safe": self._cell_count - self.config.num_mines,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Returns:
            Boolean array where True = valid action.
        """
        observation = self.board.get_observation().reshape(-1)
        hidden = observation == -1
        mask = np.concatenate([
            hidden,
            hidden | (observation == -2),
            (observation >= 0) & (observation <= 8),
        ])
        return mask
