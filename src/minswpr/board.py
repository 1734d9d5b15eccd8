"""
Board module for Minesweeper.

Implements the grid of cells with mine placement, adjacency counting,
flagging, flood-fill revealing and chord revealing. The board knows
nothing about time or win/loss; callers derive those from its state.
"""
import random
from dataclasses import InitVar, dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import CellFlags
from .sampling import sample_unique


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

class InvalidConfiguration(ValueError):
    """Raised when a board cannot be built from the given parameters."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines > self.num_cells:
            raise InvalidConfiguration(
                "num_mines must not exceed the area of the board "
                f"(max {self.num_cells})"
            )

    @property
    def num_cells(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are stored row-major in a flat list, addressed by
    ``y * width + x``. Out-of-range coordinates are never an error for
    per-cell operations; they are treated as no-ops.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    mine_indices: InitVar[Optional[Iterable[int]]] = None
    rng: InitVar[Optional[random.Random]] = None
    _cells: List[CellFlags] = field(default_factory=list, init=False, repr=False)

    def __post_init__(
        self,
        mine_indices: Optional[Iterable[int]],
        rng: Optional[random.Random],
    ) -> None:
        """Place the mines after dataclass creation."""
        if mine_indices is None:
            indices = sample_unique(
                self.config.num_mines, 0, self.config.num_cells, rng
            )
        else:
            indices = self._check_mine_indices(mine_indices)
        self._cells = self._make_cells(self.config.num_cells, indices)

    @classmethod
    def new(cls, width: int, height: int, num_mines: int) -> "Board":
        """
        Create a board with randomly placed mines.

        Raises:
            InvalidConfiguration: If ``num_mines`` exceeds the board area.
        """
        return cls(BoardConfig(width, height, num_mines))

    @classmethod
    def with_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Create a board with mines at explicit positions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions of the mines.

        Raises:
            InvalidConfiguration: If a position is off the board or repeated.
        """
        mines = list(mines)
        indices = []
        for x, y in mines:
            if not (0 <= x < width and 0 <= y < height):
                raise InvalidConfiguration(f"Mine position {(x, y)} is off the board")
            indices.append(y * width + x)
        return cls(BoardConfig(width, height, len(indices)), indices)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _check_mine_indices(self, mine_indices: Iterable[int]) -> Set[int]:
        """Validate explicit mine indices against the configuration."""
        mine_indices = list(mine_indices)
        indices = set(mine_indices)
        if len(indices) != len(mine_indices):
            raise InvalidConfiguration("Mine positions must be unique")
        if len(indices) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Expected {self.config.num_mines} mines, got {len(indices)}"
            )
        if any(not 0 <= i < self.config.num_cells for i in indices):
            raise InvalidConfiguration("Mine index is off the board")
        return indices

    @staticmethod
    def _make_cells(num_cells: int, mine_indices: Iterable[int]) -> List[CellFlags]:
        """Create the flat cell list with mines set."""
        cells = [CellFlags.NONE] * num_cells
        for index in mine_indices:
            cells[index] |= CellFlags.MINE
        return cells

    def _index(self, x: int, y: int) -> Optional[int]:
        """Flat index of a position, or None if it is off the board."""
        if not self._is_valid_position(x, y):
            return None
        return y * self.config.width + x

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _set(self, index: int, flags: CellFlags) -> None:
        self._cells[index] = CellFlags.validate(flags)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get the in-bounds Moore neighborhood of a position.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.

        Returns:
            List of (x, y) tuples, excluding the center. Order is not
            part of the contract.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _filter_neighbors(self, x: int, y: int, flag: CellFlags) -> List[Position]:
        return [
            (nx, ny) for nx, ny in self.neighbors(x, y)
            if flag in self._cells[ny * self.config.width + nx]
        ]

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a position."""
        return len(self._filter_neighbors(x, y, CellFlags.MINE))

    def count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to a position."""
        return len(self._filter_neighbors(x, y, CellFlags.FLAG))

    # ========================================================================
    # Game Actions
    # ========================================================================

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag on a cell.

        Returns:
            True if the flag was toggled, False if the position is off the
            board or the cell is already revealed.
        """
        index = self._index(x, y)
        if index is None:
            return False
        cell = self._cells[index]
        if cell.is_revealed:
            return False
        self._set(index, cell ^ CellFlags.FLAG)
        return True

    def count_flags(self) -> int:
        """Count flagged cells on the whole board."""
        return sum(1 for cell in self._cells if cell.is_flagged)

    def reveal_from(self, x: int, y: int) -> int:
        """
        Reveal a cell, flooding outward from cells with no adjacent mines.

        Flagged and already revealed cells are left alone. Expansion stops
        at mines and at cells touching a mine; checking whether the start
        cell was a mine is up to the caller.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Number of cells revealed by this call.
        """
        count = 0
        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            index = self._index(cx, cy)
            if index is None:
                continue
            cell = self._cells[index]
            if cell.is_revealed or cell.is_flagged:
                continue

            self._set(index, cell | CellFlags.REVEALED)
            count += 1

            if cell.is_mine or self.count_adjacent_mines(cx, cy) > 0:
                continue

            for nx, ny in self.neighbors(cx, cy):
                neighbor = self._cells[ny * self.config.width + nx]
                if not neighbor.is_mine and not neighbor.is_revealed:
                    pending.append((nx, ny))
        return count

    def reveal_area(self, x: int, y: int) -> List[Position]:
        """
        Chord: reveal every unflagged, unrevealed neighbor of a cell.

        Only fires from a revealed cell with at least one adjacent mine
        whose adjacent flag count equals its adjacent mine count. Mines
        are revealed like any other cell, so a wrong flag can lose the
        game here.

        Args:
            x: Column of the revealed, numbered cell.
            y: Row of the revealed, numbered cell.

        Returns:
            Positions newly revealed, empty if the chord did not fire.
        """
        cell = self.get_cell(x, y)
        if cell is None or not cell.is_revealed:
            return []

        num_mines = self.count_adjacent_mines(x, y)
        if num_mines == 0 or self.count_adjacent_flags(x, y) != num_mines:
            return []

        revealed = []
        for nx, ny in self.neighbors(x, y):
            index = ny * self.config.width + nx
            neighbor = self._cells[index]
            if neighbor.is_revealed or neighbor.is_flagged:
                continue
            self._set(index, neighbor | CellFlags.REVEALED)
            revealed.append((nx, ny))
        return revealed

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def cells(self) -> Tuple[CellFlags, ...]:
        """Snapshot of every cell, row-major."""
        return tuple(self._cells)

    def cell(self, x: int, y: int) -> CellFlags:
        """
        Get the cell at a position.

        Raises:
            IndexError: If the position is off the board.
        """
        index = self._index(x, y)
        if index is None:
            raise IndexError(f"Position {(x, y)} is off the board")
        return self._cells[index]

    def get_cell(self, x: int, y: int) -> Optional[CellFlags]:
        """Get cell at position, or None if invalid."""
        index = self._index(x, y)
        if index is None:
            return None
        return self._cells[index]

    def count_revealed(self) -> int:
        """Count revealed cells on the whole board."""
        return sum(1 for cell in self._cells if cell.is_revealed)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array, as seen by the player.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent mine count
                9 = revealed mine
        """
        obs = np.full((self.config.height, self.config.width), -1, dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self._cells[y * self.config.width + x]
                if cell.is_flagged:
                    obs[y, x] = -2
                elif cell.is_revealed:
                    obs[y, x] = 9 if cell.is_mine else self.count_adjacent_mines(x, y)
        return obs
