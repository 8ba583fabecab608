"""Constants for token race game logic."""

from enum import IntEnum
from dataclasses import dataclass
from typing import Tuple


class PlayerId(IntEnum):
    FIRST = 0   # moves along +x
    SECOND = 1  # moves along +y

    @property
    def opponent(self) -> 'PlayerId':
        """Get the opposing player."""
        return PlayerId.SECOND if self == PlayerId.FIRST else PlayerId.FIRST

    @property
    def direction(self) -> Tuple[int, int]:
        """Unit step along this player's forward axis."""
        return (1, 0) if self == PlayerId.FIRST else (0, 1)


@dataclass(frozen=True)
class Position:
    """Represents a cell on the board."""
    x: int
    y: int

    def __str__(self) -> str:
        """String representation of position (e.g. '2,1')."""
        return f"{self.x},{self.y}"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"

    def step(self, direction: Tuple[int, int], steps: int = 1) -> 'Position':
        """Position reached by walking `steps` cells in `direction`."""
        return Position(self.x + direction[0] * steps, self.y + direction[1] * steps)

    def forward_coordinate(self, player: PlayerId) -> int:
        """Coordinate along the given player's forward axis."""
        return self.x if player == PlayerId.FIRST else self.y

    @staticmethod
    def from_string(pos_str: str) -> 'Position':
        """Create Position from string like '2,1'."""
        x, y = pos_str.replace(' ', '').split(',')
        return Position(int(x), int(y))


# Game configuration
MIN_BOARD_SIZE = 3      # two edge rows/columns plus one interior line
DEFAULT_BOARD_SIZE = 3
EDGE_LINES = 2          # tokens per player = board size - EDGE_LINES

# Replay pacing, tuned for a 3x3 board
BASE_REPLAY_DELAY_MS = 500
BASE_REPLAY_GRID = 3


def max_tokens_for(board_size: int) -> int:
    """Number of tokens each player starts with on a board of this size."""
    return board_size - EDGE_LINES


def replay_delay_ms(board_size: int, base_delay_ms: float = BASE_REPLAY_DELAY_MS) -> float:
    """Per-step animation delay; larger boards replay faster."""
    return (base_delay_ms * BASE_REPLAY_GRID) / float(board_size)
