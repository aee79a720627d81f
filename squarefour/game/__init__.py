"""
squarefour.game - Core game mechanics for SquareFour

This package contains the board representation, the engine errors and the
win detection / turn flow in ``squarefour.game.rules``.
"""

from squarefour.game.board import Board
from squarefour.game.errors import (BoardError, ColumnFullError, GameOverError,
                                    InvalidSideError, InvalidSizeError,
                                    OutOfBoundsError)

# rules imports squarefour.config, so it is not imported here
__all__ = ['Board', 'BoardError', 'ColumnFullError', 'GameOverError',
           'InvalidSideError', 'InvalidSizeError', 'OutOfBoundsError']
