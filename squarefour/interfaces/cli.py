"""
cli.py - Command-line interface for SquareFour

This module provides the console front end: it asks for player names and a
board size, draws the board, reads moves and reports the result. All game
decisions are made by the engine; the CLI only translates input and prints.
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from squarefour.config import Config
from squarefour.debug import debug, DebugLevel
from squarefour.game.board import Board
from squarefour.game.errors import (BoardError, ColumnFullError, InvalidSizeError,
                                    OutOfBoundsError)
from squarefour.game.rules import SquareFourGame, WinDetector
from squarefour.utils import (FG_BLUE, FG_GREEN, FG_RED, FG_YELLOW, MAX_SIZE,
                              MIN_SIZE, Side, colorize)

# Consecutive invalid answers accepted before a prompt gives up
MAX_PROMPT_ATTEMPTS = 5

# Returned by get_human_move when the player quits
QUIT = object()


def board_size(value: str) -> int:
    """argparse type for a board size."""
    try:
        return Config.validate_size(int(value))
    except (ValueError, InvalidSizeError):
        raise argparse.ArgumentTypeError(f"board size must be a number between {MIN_SIZE} - {MAX_SIZE}")


class SimpleCLI:
    """Console interface for playing SquareFour."""

    def __init__(self, color: bool = True):
        self.game: Optional[SquareFourGame] = None
        self.args = None
        self.color = color

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='SquareFour CLI')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        play_parser.add_argument('--size', type=board_size,
                                 help=f'Board size ({MIN_SIZE}-{MAX_SIZE}); asked for when omitted')
        play_parser.add_argument('--player-a', help='Name of the first player')
        play_parser.add_argument('--player-b', help='Name of the second player')
        play_parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')
        play_parser.add_argument('--debug', action='store_true', help='Enable debug logging')

        check_parser = subparsers.add_parser('check', help='Check a board position for a win')
        check_parser.add_argument('--size', type=board_size, required=True, help='Board size')
        check_parser.add_argument('--position', required=True,
                                  help='Comma separated cell values (0 empty, 1 X, 2 O), row by row')
        check_parser.add_argument('--debug', action='store_true', help='Enable debug logging')

        for sub in (play_parser, check_parser):
            sub.add_argument('--debug-level', default='warning',
                             choices=[level.name.lower() for level in DebugLevel],
                             help='Logging level when --debug is not given')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(getattr(self.args, 'debug_level', 'warning'))

        if getattr(self.args, 'no_color', False):
            self.color = False

    def run(self) -> int:
        """Run the CLI based on the parsed arguments and return an exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'check':
            return self.check_position()

        print("Please specify a command. Use --help for options.")
        return 1

    def say(self, message: str, code: Optional[str] = None) -> None:
        print(colorize(message, code, self.color) if code else message)

    def read(self) -> Optional[str]:
        """Read one line of input, or None when input is closed."""
        try:
            return input().strip()
        except (EOFError, KeyboardInterrupt):
            debug.debug("Input closed", "cli")
            return None

    def prompt_names(self) -> Optional[List[str]]:
        names = []
        for number in (1, 2):
            self.say(f"Enter name of player {number}", FG_BLUE)
            name = self.read()
            if name is None:
                return None
            names.append(name)
        return names

    def prompt_size(self) -> Optional[int]:
        """
        Ask for a board size until a valid one is given.

        Returns:
            The size, or None if input closed or every attempt was invalid
        """
        for _ in range(MAX_PROMPT_ATTEMPTS):
            self.say("How large do you want your board to be?", FG_BLUE)
            answer = self.read()
            if answer is None:
                return None

            try:
                size = int(answer)
            except ValueError:
                size = -1
            if size < 0:
                self.say("Please enter a valid number", FG_RED)
                continue

            try:
                return Config.validate_size(size)
            except InvalidSizeError:
                self.say(f"Please enter a number between {MIN_SIZE} - {MAX_SIZE}", FG_RED)

        debug.warning("Giving up on board size after too many invalid answers", "cli")
        return None

    def setup_game(self) -> Optional[SquareFourGame]:
        """Collect names and size (from flags or prompts) and build the game."""
        player_a = getattr(self.args, 'player_a', None)
        player_b = getattr(self.args, 'player_b', None)
        if player_a is None or player_b is None:
            names = self.prompt_names()
            if names is None:
                return None
            player_a = player_a if player_a is not None else names[0]
            player_b = player_b if player_b is not None else names[1]

        size = getattr(self.args, 'size', None)
        if size is None:
            size = self.prompt_size()
            if size is None:
                return None

        return SquareFourGame(Config(size=size, player_a=player_a, player_b=player_b))

    def marker(self, side: Side) -> str:
        return colorize(side.marker, FG_RED if side == Side.A else FG_YELLOW, self.color)

    def get_human_move(self) -> Optional[int]:
        """
        Read a move from the current player.

        Columns are entered 1-based and returned 0-based.

        Returns:
            Column index, QUIT, or None if the input was not a number
        """
        size = self.game.board.size
        name = self.game.current_player_name()
        self.say(f"{name} ({self.marker(self.game.current_side)}), choose a column (1-{size}) or q to quit",
                 FG_BLUE)

        user_input = self.read()
        if user_input is None or user_input.lower() == 'q':
            return QUIT

        try:
            return int(user_input) - 1
        except ValueError:
            self.say("Please enter a valid number", FG_RED)
            return None

    def play_game(self) -> int:
        """Play a game interactively; returns the exit code."""
        self.game = self.setup_game()
        if self.game is None:
            self.say("Setup aborted.", FG_RED)
            return 1

        self.say("Populating board...", FG_GREEN)
        print(self.game.render(color=self.color))

        failures = 0
        while not self.game.is_game_over():
            if failures >= MAX_PROMPT_ATTEMPTS:
                self.say("Too many invalid moves, ending the game.", FG_RED)
                return 1

            move = self.get_human_move()
            if move is QUIT:
                self.say("Quitting game.")
                return 0
            if move is None:
                failures += 1
                continue

            try:
                self.game.play(move)
            except OutOfBoundsError:
                self.say(f"Column must be between 1 and {self.game.board.size}.", FG_RED)
                failures += 1
                continue
            except ColumnFullError:
                self.say(f"Column {move + 1} is full, pick another one.", FG_RED)
                failures += 1
                continue
            except BoardError as e:
                self.say(str(e), FG_RED)
                failures += 1
                continue

            failures = 0
            print(self.game.render(color=self.color))

        winner = self.game.winner_name()
        if winner:
            self.say(f"{winner} wins! Congratulations!", FG_GREEN)
        else:
            self.say("The board is full. It's a draw!", FG_YELLOW)
        return 0

    def check_position(self) -> int:
        """Load a position from --position and report wins and fullness."""
        size = self.args.size
        try:
            values = [int(v) for v in self.args.position.split(',')]
            if len(values) != size * size:
                raise ValueError(f"Position string must have {size * size} values, got {len(values)}")
            board = Board.from_state(np.array(values).reshape(size, size))
        except (ValueError, BoardError) as e:
            self.say(f"Error parsing position: {e}", FG_RED)
            return 1

        print("Loaded position:")
        print(board.render(color=self.color))

        has_win = False
        for side in (Side.A, Side.B):
            line = WinDetector.winning_line(board, side)
            if line:
                has_win = True
                cells = ", ".join(f"({r}, {c})" for r, c in line)
                self.say(f"Win for {side.name} ({side.marker}) at {cells}")

        if not has_win:
            self.say("No win detected for any side")

        if board.is_full():
            self.say("Board is full")
        else:
            self.say(f"Empty spaces: {int(np.sum(board.grid == Side.EMPTY.value))}")
            self.say(f"Valid moves: {[col + 1 for col in board.get_valid_moves()]}")
            self.say(f"Column heights: {[board.column_height(col) for col in range(size)]}")
        return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
