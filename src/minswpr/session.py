"""
Game session for Minesweeper.

A ``Game`` owns the board for one round and turns player actions into
game state transitions. Renderers read the board through ``game.board``
between actions; only the game mutates it.
"""
import logging
import random
import time
from enum import Enum, auto
from typing import Callable, Optional

from .board import Board, BoardConfig
from .stopwatch import Stopwatch


logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of a round."""

    READY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Game:
    """
    A single-player round of Minesweeper.

    The first reveal or chord starts the stopwatch. Revealing a mine
    loses; revealing every safe cell wins. Once over, the board is frozen
    until ``reset`` replaces it.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Initialize a game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            clock: Time source for the stopwatch.
            rng: Random source for mine placement.
            board: Pre-built board to play on instead of a random one.
        """
        self.config = board.config if board is not None else (config or BoardConfig())
        self.rng = rng
        self.stopwatch = Stopwatch(clock)
        self._board = board if board is not None else self._make_board()
        self._state = GameState.READY

    def _make_board(self) -> Board:
        return Board(self.config, rng=self.rng)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> GameState:
        """
        Reveal a cell, flooding from empty cells.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            The game state after the action.
        """
        if not self._accepts_click(x, y):
            return self._state

        self._start_if_ready()
        if self._board.reveal_from(x, y) == 0:
            return self._state
        if self._board.cell(x, y).is_mine:
            self._finish(GameState.LOST)
        else:
            self._check_win_condition()
        return self._state

    def chord(self, x: int, y: int) -> GameState:
        """
        Reveal the unflagged neighbors of a satisfied numbered cell.

        Returns:
            The game state after the action.
        """
        if not self._accepts_click(x, y):
            return self._state

        self._start_if_ready()
        revealed = self._board.reveal_area(x, y)
        if not revealed:
            return self._state
        if any(self._board.cell(nx, ny).is_mine for nx, ny in revealed):
            self._finish(GameState.LOST)
        else:
            self._check_win_condition()
        return self._state

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle a flag on a cell.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if self.is_over:
            return False
        return self._board.toggle_flag(x, y)

    def reset(self) -> None:
        """Discard the board and start a fresh round."""
        self._board = self._make_board()
        self._state = GameState.READY
        self.stopwatch.reset()
        logger.info(
            "New game: %dx%d with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    def _accepts_click(self, x: int, y: int) -> bool:
        return not self.is_over and self._board.get_cell(x, y) is not None

    def _start_if_ready(self) -> None:
        if self._state == GameState.READY:
            self._state = GameState.PLAYING
            self.stopwatch.start()
            logger.debug("Game started")

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        safe_cells = self.config.num_cells - self.config.num_mines
        if self._board.count_revealed() >= safe_cells:
            self._finish(GameState.WON)

    def _finish(self, state: GameState) -> None:
        self._state = state
        self.stopwatch.stop()
        logger.info("Game %s after %.1fs", state.name.lower(), self.stopwatch.elapsed)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """The current board. Callers must not mutate it directly."""
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if game was won or lost."""
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self._board.num_mines - self._board.count_flags()
