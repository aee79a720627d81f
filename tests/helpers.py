"""Shared board builders for the test suite."""

from squarefour.game.board import Board
from squarefour.utils import Side


def place(board: Board, cells, side: Side) -> Board:
    """Put pieces straight into the grid, bypassing gravity."""
    for row, col in cells:
        board.grid[row, col] = side.value
    return board


def no_line_pattern(size: int = 6):
    """
    Full grid with no four in a row for any size.

    Each row is made of 3-wide blocks alternating A and B, and every other
    row is inverted, so rows break every three cells and columns and
    diagonals change side at least every other cell.
    """
    return [
        [Side.A.value if ((c // 3) % 2 == 0) == (r % 2 == 0) else Side.B.value
         for c in range(size)]
        for r in range(size)
    ]
