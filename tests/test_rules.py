"""
Tests for WinDetector: every direction, board edges and false positives.
"""

import pytest

from helpers import no_line_pattern, place
from squarefour.game.board import Board
from squarefour.game.rules import WinDetector
from squarefour.utils import MAX_SIZE, MIN_SIZE, Side


class TestWinDirections:
    """One winning line per direction on a 6x6 board."""

    def test_horizontal_win(self, board):
        place(board, [(5, 0), (5, 1), (5, 2), (5, 3)], Side.A)
        assert WinDetector.check(board, Side.A)
        assert WinDetector.check_horizontal(board, Side.A)
        assert not WinDetector.check(board, Side.B)

    def test_vertical_win(self, board):
        place(board, [(5, 2), (4, 2), (3, 2), (2, 2)], Side.A)
        assert WinDetector.check(board, Side.A)
        assert WinDetector.check_vertical(board, Side.A)
        assert not WinDetector.check_horizontal(board, Side.A)
        assert not WinDetector.check(board, Side.B)

    def test_positive_diagonal_win(self, board):
        place(board, [(2, 0), (3, 1), (4, 2), (5, 3)], Side.A)
        assert WinDetector.check(board, Side.A)
        assert WinDetector.check_positive_diagonal(board, Side.A)
        assert not WinDetector.check_negative_diagonal(board, Side.A)

    def test_negative_diagonal_win(self, board):
        place(board, [(5, 0), (4, 1), (3, 2), (2, 3)], Side.A)
        assert WinDetector.check(board, Side.A)
        assert WinDetector.check_negative_diagonal(board, Side.A)
        assert not WinDetector.check_positive_diagonal(board, Side.A)

    def test_win_for_second_side(self, board):
        place(board, [(1, 5), (2, 5), (3, 5), (4, 5)], Side.B)
        assert WinDetector.check(board, Side.B)
        assert not WinDetector.check(board, Side.A)


class TestBoardEdges:
    """Lines touching the far corners of the largest and smallest boards."""

    @pytest.mark.parametrize("size", [MIN_SIZE, 9, MAX_SIZE])
    def test_bottom_right_corner_lines(self, size):
        last = size - 1
        horizontal = place(Board(size), [(last, last - i) for i in range(4)], Side.B)
        vertical = place(Board(size), [(last - i, last) for i in range(4)], Side.B)
        diagonal = place(Board(size), [(last - i, last - i) for i in range(4)], Side.B)
        assert WinDetector.check(horizontal, Side.B)
        assert WinDetector.check(vertical, Side.B)
        assert WinDetector.check(diagonal, Side.B)

    @pytest.mark.parametrize("size", [MIN_SIZE, MAX_SIZE])
    def test_top_right_anti_diagonal(self, size):
        last = size - 1
        board = place(Board(size), [(3 - i, last - 3 + i) for i in range(4)], Side.A)
        assert WinDetector.check_negative_diagonal(board, Side.A)

    def test_longer_line_still_wins(self):
        board = place(Board(MAX_SIZE), [(7, c) for c in range(2, 9)], Side.A)
        assert WinDetector.check(board, Side.A)


class TestNoFalsePositives:
    """Boards that must not register a win."""

    def test_empty_board(self, board):
        assert not WinDetector.check(board, Side.A)
        assert not WinDetector.check(board, Side.B)

    def test_empty_side_never_wins(self, board):
        assert not WinDetector.check(board, Side.EMPTY)
        assert WinDetector.winning_line(board, Side.EMPTY) == []

    @pytest.mark.parametrize("size", range(MIN_SIZE, MAX_SIZE + 1))
    def test_full_board_without_lines(self, size):
        board = Board.from_state(no_line_pattern(size))
        assert not WinDetector.check(board, Side.A)
        assert not WinDetector.check(board, Side.B)

    def test_three_in_each_direction(self, board):
        place(board, [(5, 0), (5, 1), (5, 2)], Side.A)
        place(board, [(4, 5), (3, 5), (2, 5)], Side.A)
        place(board, [(0, 0), (1, 1), (2, 2)], Side.A)
        place(board, [(3, 0), (2, 1), (1, 2)], Side.A)
        assert not WinDetector.check(board, Side.A)

    def test_broken_sequence(self, board):
        place(board, [(5, 0), (5, 1), (5, 3), (5, 4)], Side.A)
        assert not WinDetector.check(board, Side.A)

    def test_mixed_line_is_not_a_win(self, board):
        # bottom row A A B B, diagonal B B A B
        place(board, [(5, 0), (5, 1), (4, 2)], Side.A)
        place(board, [(5, 2), (5, 3), (2, 0), (3, 1)], Side.B)
        assert not WinDetector.check(board, Side.A)
        assert not WinDetector.check(board, Side.B)

    def test_counter_resets_between_rows(self, board):
        # two at the end of one row and two at the start of the next
        place(board, [(4, 4), (4, 5), (5, 0), (5, 1)], Side.A)
        assert not WinDetector.check(board, Side.A)

    def test_counter_resets_between_columns(self, board):
        place(board, [(4, 0), (5, 0), (0, 1), (1, 1)], Side.A)
        assert not WinDetector.check(board, Side.A)


class TestWinningLine:
    """Coordinates reported for the first line found."""

    def test_horizontal_line_coordinates(self, board):
        place(board, [(5, 1), (5, 2), (5, 3), (5, 4)], Side.B)
        assert WinDetector.winning_line(board, Side.B) == [(5, 1), (5, 2), (5, 3), (5, 4)]

    def test_negative_diagonal_coordinates(self, board):
        place(board, [(5, 0), (4, 1), (3, 2), (2, 3)], Side.A)
        assert WinDetector.winning_line(board, Side.A) == [(5, 0), (4, 1), (3, 2), (2, 3)]

    def test_no_line(self, board):
        place(board, [(5, 0), (5, 1), (5, 2)], Side.A)
        assert WinDetector.winning_line(board, Side.A) == []
