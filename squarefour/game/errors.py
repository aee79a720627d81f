"""
errors.py - Exceptions raised by the SquareFour engine

All of these are recoverable: the engine raises them without touching the
board, and the caller reports the problem and asks for another move.
"""

from squarefour.utils import MIN_SIZE, MAX_SIZE


class BoardError(Exception):
    """Base class for all engine errors."""
    pass


class InvalidSizeError(BoardError, ValueError):
    """Raised when a board is requested outside the supported size range."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size!r}")


class OutOfBoundsError(BoardError, IndexError):
    """Raised when a drop targets a column that does not exist."""

    def __init__(self, column: int, size: int):
        self.column = column
        self.size = size
        super().__init__(f"Column {column} is out of bounds for a board of size {size}")


class ColumnFullError(BoardError):
    """Raised when a drop targets a column with no empty cell."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class InvalidSideError(BoardError, ValueError):
    """Raised when a piece is dropped without a real side."""

    def __init__(self, side):
        self.side = side
        super().__init__(f"Cannot drop a piece for side {side!r}")


class GameOverError(BoardError):
    """Raised when a move is attempted after the game has ended."""
    pass
