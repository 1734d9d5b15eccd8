"""
Cell module for Minesweeper.

A cell is a small bit-set of independent facts about one grid position:
whether it has been revealed, whether it hides a mine and whether the
player has flagged it.
"""
from enum import IntFlag


# ============================================================================
# Cell Flags
# ============================================================================

class CellFlags(IntFlag):
    """Bit flags describing the state of a single cell."""

    NONE = 0
    REVEALED = 0b0000_0001
    MINE = 0b0000_0010
    FLAG = 0b0000_0100

    @classmethod
    def validate(cls, flags: "CellFlags") -> "CellFlags":
        """
        Check that a combination of flags is legal.

        Args:
            flags: Flags to check.

        Returns:
            The flags, unchanged.

        Raises:
            ValueError: If the cell would be both flagged and revealed.
        """
        flags = cls(flags)
        if CellFlags.FLAG in flags and CellFlags.REVEALED in flags:
            raise ValueError("A cell cannot be both flagged and revealed")
        return flags

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return CellFlags.REVEALED in self

    @property
    def is_mine(self) -> bool:
        """Check if cell hides a mine."""
        return CellFlags.MINE in self

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return CellFlags.FLAG in self

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self & (CellFlags.REVEALED | CellFlags.FLAG)
