"""
Text rendering for Minesweeper boards.
"""
from .board import Board
from .session import Game


HIDDEN = "."
FLAG = "F"
MINE = "*"
EMPTY = " "


def render_cell(board: Board, x: int, y: int, show_mines: bool = False) -> str:
    """Glyph for a single cell."""
    cell = board.cell(x, y)
    if cell.is_flagged:
        return FLAG
    if cell.is_revealed:
        if cell.is_mine:
            return MINE
        count = board.count_adjacent_mines(x, y)
        return str(count) if count else EMPTY
    if show_mines and cell.is_mine:
        return MINE
    return HIDDEN


def render_board(board: Board, show_mines: bool = False) -> str:
    """
    Render a board as text, one line per row.

    Args:
        board: Board to render.
        show_mines: Also show mines that are still hidden (game over view).

    Returns:
        Rows joined by newlines, cells separated by a space.
    """
    lines = []
    for y in range(board.height):
        row = [render_cell(board, x, y, show_mines) for x in range(board.width)]
        lines.append(" ".join(row))
    return "\n".join(lines)


def render_status(game: Game) -> str:
    """Status line with mines remaining, elapsed time and state."""
    return (
        f"Mines: {game.mines_remaining:>3} | "
        f"Time: {int(game.stopwatch.elapsed):03d} | "
        f"{game.state.name}"
    )
