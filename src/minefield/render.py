"""
Text rendering of a board.

Uses only the board's read-only queries.
"""
from .board import Board


FLAG_SYMBOL = "F"
HIDDEN_SYMBOL = "_"
MINE_SYMBOL = "X"


def cell_symbol(board: Board, x: int, y: int) -> str:
    """Single-character symbol for the cell at (x, y)."""
    cell = board.cell(x, y)
    if cell.is_flagged:
        return FLAG_SYMBOL
    if not cell.is_revealed:
        return HIDDEN_SYMBOL
    if cell.is_mine:
        return MINE_SYMBOL
    return str(board.adjacent_count(x, y))


def render_board(board: Board) -> str:
    """Render board as text, one line per row."""
    lines = []
    for y in range(board.height):
        lines.append(
            " ".join(cell_symbol(board, x, y) for x in range(board.width))
        )
    return "\n".join(lines)
