"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minswpr import Board, BoardConfig, Game


class FakeClock:
    """Manually advanced time source for stopwatch tests."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def empty_board() -> Board:
    """Create a 9x9 board with no mines for flood fill testing."""
    return Board.new(9, 9, 0)


@pytest.fixture
def single_mine_board() -> Board:
    """Create a 9x9 board with one mine at (1, 0)."""
    return Board.with_mines(9, 9, [(1, 0)])


@pytest.fixture
def chord_board() -> Board:
    """Create a 9x9 board with mines at (0, 0) and (1, 0), (1, 1) revealed."""
    board = Board.with_mines(9, 9, [(0, 0), (1, 0)])
    board.reveal_from(1, 1)
    return board


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def corner_game(clock: FakeClock) -> Game:
    """
    Create a 3x3 game with a single mine in the bottom-right corner.

    . . .
    . 1 1
    . 1 *
    """
    return Game(board=Board.with_mines(3, 3, [(2, 2)]), clock=clock)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
