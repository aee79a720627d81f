"""
config.py - Game configuration for SquareFour

Collects everything gathered during setup (board size and player names) into
one immutable object that is handed to the game once setup is complete.
"""

from dataclasses import dataclass

from squarefour.game.errors import InvalidSizeError
from squarefour.utils import DEFAULT_SIZE, Side, is_valid_size

DEFAULT_PLAYER_A = "Player 1"
DEFAULT_PLAYER_B = "Player 2"


@dataclass(frozen=True)
class Config:
    size: int = DEFAULT_SIZE
    player_a: str = DEFAULT_PLAYER_A
    player_b: str = DEFAULT_PLAYER_B

    def __post_init__(self):
        self.validate_size(self.size)
        # frozen dataclass, so normalised names go through object.__setattr__
        object.__setattr__(self, "size", int(self.size))
        object.__setattr__(self, "player_a", (self.player_a or "").strip() or DEFAULT_PLAYER_A)
        object.__setattr__(self, "player_b", (self.player_b or "").strip() or DEFAULT_PLAYER_B)

    @staticmethod
    def validate_size(size) -> int:
        """Return size unchanged, raising InvalidSizeError if it is out of range."""
        if not is_valid_size(size):
            raise InvalidSizeError(size)
        return size

    def name_of(self, side: Side) -> str:
        if side == Side.A:
            return self.player_a
        elif side == Side.B:
            return self.player_b
        raise ValueError(f"Side {side.name} has no player")
