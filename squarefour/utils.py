"""
utils.py - Constants, enumerations and helpers for SquareFour

This module provides the board size limits, the Side and GameResult
enumerations, and small grid helpers shared by the engine and the CLI.
"""

from enum import Enum, auto
from typing import Iterable, Optional, Set, Tuple

import numpy as np

# Game constants
MIN_SIZE = 6
MAX_SIZE = 12
DEFAULT_SIZE = 7
CONNECT_N = 4  # Number of pieces in a row to win

TILE_WIDTH = 3

# ANSI escape codes used by the console renderer
RESET = "\033[0m"
BOLD = "\033[1m"
REVERSE = "\033[7m"
FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"

Coord = Tuple[int, int]


class Side(Enum):
    """Occupancy state of a cell, doubling as the identity of a player."""
    EMPTY = 0
    A = 1    # First player
    B = 2    # Second player

    def other(self) -> 'Side':
        """Get the opposing side."""
        if self == Side.A:
            return Side.B
        elif self == Side.B:
            return Side.A
        return Side.EMPTY

    @property
    def marker(self) -> str:
        if self == Side.A:
            return "X"
        elif self == Side.B:
            return "O"
        return " "

    def __str__(self):
        return self.marker


class GameResult(Enum):
    """Outcome of a game."""
    IN_PROGRESS = auto()
    PLAYER_A_WIN = auto()
    PLAYER_B_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    @staticmethod
    def win_for(side: Side) -> 'GameResult':
        if side == Side.A:
            return GameResult.PLAYER_A_WIN
        elif side == Side.B:
            return GameResult.PLAYER_B_WIN
        raise ValueError(f"No win result for side {side.name}")


def colorize(text: str, code: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI color code unless coloring is disabled."""
    if not enabled:
        return text
    return f"{code}{text}{RESET}"


def is_valid_position(row: int, col: int, size: int) -> bool:
    """
    Check if a position is within the boundaries of a size x size board.

    Args:
        row: Row index
        col: Column index
        size: Board edge length

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < size and 0 <= col < size


def is_valid_size(size) -> bool:
    """True if ``size`` is an integer within [MIN_SIZE, MAX_SIZE]."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        return False
    return MIN_SIZE <= size <= MAX_SIZE


def _cell_marker(value: int, color: bool) -> str:
    side = Side(int(value))
    if side == Side.A:
        return colorize(side.marker, FG_RED, color)
    elif side == Side.B:
        return colorize(side.marker, FG_YELLOW, color)
    return side.marker


def render_board_ascii(grid: np.ndarray, color: bool = False,
                       highlight: Optional[Iterable[Coord]] = None) -> str:
    """
    Render a square grid as ASCII art.

    Each cell is drawn TILE_WIDTH characters wide between ``|`` separators,
    every row is followed by a ``-`` rule, and a 1-based column number footer
    closes the drawing.

    Args:
        grid: The board grid of Side values
        color: Whether to use ANSI colors for the markers
        highlight: Cells drawn in reverse video, e.g. a winning line

    Returns:
        ASCII representation of the board
    """
    size = grid.shape[1]
    grid_width = size * (TILE_WIDTH + 1)
    rule = "-" + "-" * grid_width
    marked: Set[Coord] = set(highlight) if highlight else set()
    # pad around the marker by hand; escape codes would skew str.center
    left = (TILE_WIDTH - 1) // 2
    right = TILE_WIDTH - 1 - left

    lines = [rule]
    for row in range(grid.shape[0]):
        line = ""
        for col in range(size):
            marker = _cell_marker(grid[row, col], color)
            if (row, col) in marked:
                if color:
                    cell = colorize(" " * left + marker + " " * right, REVERSE + BOLD)
                else:
                    cell = f"[{marker}]"
            else:
                cell = " " * left + marker + " " * right
            line += "|" + cell
        lines.append(line + "|")
        lines.append(rule)

    lines.append("".join(f" {i + 1:^{TILE_WIDTH}}" for i in range(size)))
    return "\n".join(lines)
