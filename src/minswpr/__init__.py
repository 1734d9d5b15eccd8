"""
Minesweeper package.

Provides the board engine (cell state, mine placement, flood-fill and
chord reveals) and the game session, configuration, text rendering and
environment built on top of it.
"""
from .cell import CellFlags
from .sampling import sample_unique
from .board import Board, BoardConfig, InvalidConfiguration
from .config import (
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    ConfigError,
    GameConfig,
)
from .stopwatch import Stopwatch
from .session import Game, GameState
from .environment import MinesweeperEnv

__all__ = [
    "CellFlags",
    "sample_unique",
    "Board",
    "BoardConfig",
    "InvalidConfiguration",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "ConfigError",
    "GameConfig",
    "Stopwatch",
    "Game",
    "GameState",
    "MinesweeperEnv",
]
