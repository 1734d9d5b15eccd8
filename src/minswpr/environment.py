"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game session through the standard Env interface so it can be
driven programmatically.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .render import render_board
from .session import Game, GameState


# Action kinds, in the order they occupy the action space
REVEAL = 0
FLAG = 1
CHORD = 2
NUM_ACTION_KINDS = 3


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * width * height. For action a,
        ``a // (width * height)`` selects reveal, flag or chord and
        ``a % (width * height)`` is the cell index ``y * width + x``.

    Rewards:
        - +1 for an action that changed the board
        - +10 for winning the game
        - -10 for revealing a mine
        - -0.1 for an action that changed nothing
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
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            NUM_ACTION_KINDS * self.config.num_cells
        )

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
            seed: Seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng = random.Random(seed)
        self.game.reset()
        self._steps = 0

        return self.game.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        kind, x, y = self.decode_action(action)
        self._steps += 1

        reward = self._apply(kind, x, y)
        observation = self.game.board.get_observation()
        terminated = self.game.is_over

        return observation, reward, terminated, False, self._get_info()

    def decode_action(self, action: int) -> Tuple[int, int, int]:
        """Convert a flat action into (kind, x, y)."""
        kind, index = divmod(int(action), self.config.num_cells)
        y, x = divmod(index, self.config.width)
        return kind, x, y

    def _apply(self, kind: int, x: int, y: int) -> float:
        """Perform an action and compute its reward."""
        board = self.game.board
        if self.game.is_over:
            return -0.1

        if kind == FLAG:
            return 1.0 if self.game.toggle_flag(x, y) else -0.1

        revealed_before = board.count_revealed()
        if kind == REVEAL:
            state = self.game.reveal(x, y)
        else:
            state = self.game.chord(x, y)

        if state == GameState.LOST:
            return -10.0
        if state == GameState.WON:
            return 10.0
        if board.count_revealed() == revealed_before:
            return -0.1
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.board.count_revealed(),
            "total_safe": self.config.num_cells - self.config.num_mines,
            "mines_remaining": self.game.mines_remaining,
            "game_state": self.game.state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.game.board, show_mines=self.game.is_over)
        if self.render_mode == "human":
            print(render_board(self.game.board, show_mines=self.game.is_over))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        cells = self.config.num_cells
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.game.is_over:
            return mask

        board = self.game.board
        for index, cell in enumerate(board.cells()):
            y, x = divmod(index, self.config.width)
            if cell.is_hidden:
                mask[REVEAL * cells + index] = True
            if not cell.is_revealed:
                mask[FLAG * cells + index] = True
            elif self._can_chord(x, y):
                mask[CHORD * cells + index] = True
        return mask

    def _can_chord(self, x: int, y: int) -> bool:
        board = self.game.board
        num_mines = board.count_adjacent_mines(x, y)
        if num_mines == 0 or board.count_adjacent_flags(x, y) != num_mines:
            return False
        return any(
            board.cell(nx, ny).is_hidden for nx, ny in board.neighbors(x, y)
        )
