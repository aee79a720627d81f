"""
rules.py - Win detection and game flow for SquareFour

This module provides:
1. WinDetector, which scans a board for four in a row for one side
2. SquareFourGame, which alternates turns and stops on a win or a draw
"""

from typing import List, Optional

from squarefour.config import Config
from squarefour.debug import debug
from squarefour.game.board import Board
from squarefour.game.errors import GameOverError
from squarefour.utils import CONNECT_N, Coord, GameResult, Side


class WinDetector:
    """
    Decides whether a side has CONNECT_N consecutive pieces on a board.

    Rows and columns are scanned with a running counter; diagonals are
    probed from every anchor cell that leaves room for a full line. All
    methods are stateless.
    """

    @staticmethod
    def check(board: Board, side: Side) -> bool:
        """
        Check whether ``side`` has a line in any direction.

        Args:
            board: The board to scan
            side: The side that just moved

        Returns:
            True if the side has a winning line
        """
        if side == Side.EMPTY:
            return False

        debug.start_timer("win_check")
        won = (WinDetector.check_horizontal(board, side)
               or WinDetector.check_vertical(board, side)
               or WinDetector.check_positive_diagonal(board, side)
               or WinDetector.check_negative_diagonal(board, side))
        debug.end_timer("win_check", "rules")
        return won

    @staticmethod
    def check_horizontal(board: Board, side: Side) -> bool:
        for row in range(board.size):
            count = 0
            for col in range(board.size):
                if board.get(row, col) == side:
                    count += 1
                    if count == CONNECT_N:
                        return True
                else:
                    count = 0
        return False

    @staticmethod
    def check_vertical(board: Board, side: Side) -> bool:
        for col in range(board.size):
            count = 0
            for row in range(board.size):
                if board.get(row, col) == side:
                    count += 1
                    if count == CONNECT_N:
                        return True
                else:
                    count = 0
        return False

    @staticmethod
    def check_positive_diagonal(board: Board, side: Side) -> bool:
        """Down-right diagonals anchored at their top-left cell."""
        for row in range(board.size - CONNECT_N + 1):
            for col in range(board.size - CONNECT_N + 1):
                if all(board.get(row + i, col + i) == side for i in range(CONNECT_N)):
                    return True
        return False

    @staticmethod
    def check_negative_diagonal(board: Board, side: Side) -> bool:
        """Up-right diagonals anchored at their bottom-left cell."""
        for row in range(CONNECT_N - 1, board.size):
            for col in range(board.size - CONNECT_N + 1):
                if all(board.get(row - i, col + i) == side for i in range(CONNECT_N)):
                    return True
        return False

    @staticmethod
    def winning_line(board: Board, side: Side) -> List[Coord]:
        """
        Find the first winning line for a side, in the same order ``check`` scans.

        Returns:
            The CONNECT_N (row, col) cells of the line, or an empty list
        """
        if side == Side.EMPTY:
            return []

        n = board.size
        # (row range, col range, row step, col step) per direction
        directions = [
            (range(n), range(n - CONNECT_N + 1), 0, 1),
            (range(n - CONNECT_N + 1), range(n), 1, 0),
            (range(n - CONNECT_N + 1), range(n - CONNECT_N + 1), 1, 1),
            (range(CONNECT_N - 1, n), range(n - CONNECT_N + 1), -1, 1),
        ]
        for rows, cols, dr, dc in directions:
            for row in rows:
                for col in cols:
                    line = [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]
                    if all(board.get(r, c) == side for r, c in line):
                        return line
        return []


class SquareFourGame:
    """
    Two-player game flow on top of a Board.

    The game waits for a move from the current side, drops it, checks the
    mover for a win and either ends or hands the turn to the other side.
    Failed drops leave both the board and the turn unchanged.
    """

    def __init__(self, config: Optional[Config] = None):
        """Start a new game; Config() defaults are used when none is given."""
        self.config = config if config is not None else Config()
        debug.debug(f"Initializing SquareFourGame with {self.config}", "game")
        self.board = Board(self.config.size)
        self.current_side = Side.A
        self.game_result = GameResult.IN_PROGRESS

    def play(self, column: int) -> int:
        """
        Drop a piece for the current side.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            The row the piece landed in

        Raises:
            GameOverError: If the game has already ended
            BoardError: Any drop error from the board; the turn does not pass
        """
        if self.is_game_over():
            debug.warning(f"Move in column {column} after game over", "game")
            raise GameOverError(f"The game is over ({self.game_result.name})")

        side = self.current_side
        row = self.board.drop(column, side)
        debug.debug(f"{side.name} dropped into column {column}, landed on row {row}", "game")

        if WinDetector.check(self.board, side):
            self.game_result = GameResult.win_for(side)
            debug.info(f"{self.config.name_of(side)} ({side.name}) wins after move at {(row, column)}", "game")
        elif self.board.is_full():
            self.game_result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        else:
            self.current_side = side.other()

        return row

    def is_game_over(self) -> bool:
        return self.game_result.is_game_over()

    def get_winner(self) -> Optional[Side]:
        """
        Get the winner of the game.

        Returns:
            The winning side, or None while in progress or after a draw
        """
        if self.game_result == GameResult.PLAYER_A_WIN:
            return Side.A
        elif self.game_result == GameResult.PLAYER_B_WIN:
            return Side.B
        return None

    def winner_name(self) -> Optional[str]:
        winner = self.get_winner()
        return self.config.name_of(winner) if winner else None

    def current_player_name(self) -> str:
        return self.config.name_of(self.current_side)

    def winning_line(self) -> List[Coord]:
        winner = self.get_winner()
        return WinDetector.winning_line(self.board, winner) if winner else []

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self.board.get_valid_moves()

    def render(self, color: bool = False) -> str:
        return self.board.render(color=color, highlight=self.winning_line())
