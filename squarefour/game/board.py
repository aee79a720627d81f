"""
board.py - Board representation and drop mechanics for SquareFour

This module implements the Board class: a square grid of Side values that
only changes through gravity drops. Whose turn it is and whether anyone has
won are left to the rules module.
"""

from typing import List, Optional, Tuple

import numpy as np

from squarefour.debug import debug
from squarefour.game.errors import (ColumnFullError, InvalidSideError,
                                    InvalidSizeError, OutOfBoundsError)
from squarefour.utils import (Side, is_valid_position, is_valid_size,
                              render_board_ascii)


class Board:
    """
    Represents a square SquareFour game board.

    Row 0 is the top of the board and row ``size - 1`` the bottom. Cells start
    EMPTY and are filled bottom-up by ``drop``; a filled cell never changes
    again.
    """

    def __init__(self, size: int):
        """
        Initialize an empty board.

        Args:
            size: Edge length of the board, between MIN_SIZE and MAX_SIZE

        Raises:
            InvalidSizeError: If size is out of range
        """
        if not is_valid_size(size):
            debug.warning(f"Rejected board size {size!r}", "board")
            raise InvalidSizeError(size)

        debug.debug(f"Initializing new {size}x{size} Board", "board")
        self.size = int(size)
        self.grid = np.full((self.size, self.size), Side.EMPTY.value, dtype=np.int8)
        self.moves_made: List[Tuple[int, Side]] = []
        self.last_move: Optional[Tuple[int, int]] = None

    @classmethod
    def from_state(cls, state) -> 'Board':
        """
        Build a board from an existing square grid of Side values.

        Pieces are taken as-is; no gravity is applied and no move history is
        recorded.

        Raises:
            InvalidSizeError: If the grid is not square or its size is out of range
            ValueError: If a cell holds something other than a Side value
        """
        values = np.asarray(state)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise InvalidSizeError(values.shape)

        board = cls(values.shape[0])
        valid = {side.value for side in Side}
        # check before the int8 cast, which would wrap e.g. 257 to 1
        if not np.isin(values, list(valid)).all():
            raise ValueError(f"Cell values must be one of {sorted(valid)}")

        board.grid = values.astype(np.int8)
        return board

    def get(self, row: int, column: int) -> Side:
        """
        Read a cell.

        Coordinates outside the board read as EMPTY instead of raising, so
        line scanners can probe past the edges safely.
        """
        if not is_valid_position(row, column, self.size):
            return Side.EMPTY
        return Side(int(self.grid[row, column]))

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a piece can be dropped into a column.

        Args:
            column: The column to check (0-indexed)

        Returns:
            True if the column exists and has an empty cell
        """
        if not 0 <= column < self.size:
            return False
        return bool(np.any(self.grid[:, column] == Side.EMPTY.value))

    def get_valid_moves(self) -> List[int]:
        """Get the columns that still accept a piece."""
        return [col for col in range(self.size) if self.is_valid_move(col)]

    def column_height(self, column: int) -> int:
        """Number of pieces currently in a column."""
        if not 0 <= column < self.size:
            raise OutOfBoundsError(column, self.size)
        return int(np.count_nonzero(self.grid[:, column] != Side.EMPTY.value))

    def drop(self, column: int, side: Side) -> int:
        """
        Drop a piece into a column.

        The piece lands in the lowest empty cell of the column. Nothing is
        modified when the drop fails.

        Args:
            column: The column to drop into (0-indexed)
            side: The side the piece belongs to

        Returns:
            The row index the piece landed in

        Raises:
            OutOfBoundsError: If column is not in [0, size - 1]
            InvalidSideError: If side is not a player side
            ColumnFullError: If the column has no empty cell
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)) \
                or not 0 <= column < self.size:
            debug.debug(f"Invalid drop: column {column} out of bounds", "board")
            raise OutOfBoundsError(column, self.size)

        if not isinstance(side, Side) or side == Side.EMPTY:
            debug.debug(f"Invalid drop: side {side!r}", "board")
            raise InvalidSideError(side)

        for row in range(self.size - 1, -1, -1):
            if self.grid[row, column] == Side.EMPTY.value:
                self.grid[row, column] = side.value
                self.last_move = (row, int(column))
                self.moves_made.append((int(column), side))
                debug.trace(f"Placed {side.name} at ({row}, {column})", "board")
                return row

        debug.debug(f"Invalid drop: column {column} is full", "board")
        raise ColumnFullError(column)

    def is_full(self) -> bool:
        """True if no column has an empty cell left."""
        return not bool(np.any(self.grid == Side.EMPTY.value))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 2D grid of Side values
        """
        return self.grid.copy()

    def render(self, color: bool = False, highlight=None) -> str:
        """Render the board as a string."""
        return render_board_ascii(self.grid, color=color, highlight=highlight)

    def __str__(self) -> str:
        return self.render()
