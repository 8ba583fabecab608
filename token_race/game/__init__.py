"""Game logic package for token race."""

from .constants import PlayerId, Position, MIN_BOARD_SIZE, DEFAULT_BOARD_SIZE
from .errors import (
    TokenRaceError,
    BoardError,
    InvalidPosition,
    EmptySource,
    Immovable,
    BlockedJump,
    CapacityExceeded,
)
from .types import MoveStep, Outcome
from .token import Token, TokenArena
from .board import Board
from .player import Player
from .game_state import GameState

__all__ = [
    'PlayerId',
    'Position',
    'MIN_BOARD_SIZE',
    'DEFAULT_BOARD_SIZE',
    'TokenRaceError',
    'BoardError',
    'InvalidPosition',
    'EmptySource',
    'Immovable',
    'BlockedJump',
    'CapacityExceeded',
    'MoveStep',
    'Outcome',
    'Token',
    'TokenArena',
    'Board',
    'Player',
    'GameState',
]
