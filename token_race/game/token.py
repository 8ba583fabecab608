"""Tokens and the arena that holds them."""

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List
import logging

from .constants import PlayerId, Position

logger = logging.getLogger(__name__)


@dataclass
class Token:
    """A single movable unit on the board."""
    token_id: int
    position: Position
    owner: PlayerId
    movable: bool = True
    reached_end: bool = False
    scored: bool = False  # set once the token has counted toward its owner's score

    def mark_reached_end(self):
        """Flag arrival on an edge; a token at the end never moves again."""
        self.reached_end = True
        self.movable = False

    def clear_reached_end(self):
        self.reached_end = False
        self.movable = True


class TokenArena:
    """Owns every token of one game, indexed by stable ids.

    The board stores token ids per cell and players store lists of ids;
    both resolve them through the arena of their game.
    """

    def __init__(self):
        self._tokens: List[Token] = []

    def spawn(self, position: Position, owner: PlayerId) -> Token:
        """Create a token and give it the next free id."""
        token = Token(token_id=len(self._tokens), position=position, owner=owner)
        self._tokens.append(token)
        logger.debug(f"Spawned token {token.token_id} for {owner.name} at {position}")
        return token

    def copy(self) -> 'TokenArena':
        """Create a deep copy of the arena (tokens keep their ids)."""
        new_arena = TokenArena()
        new_arena._tokens = [replace(token) for token in self._tokens]
        return new_arena

    def snapshot(self) -> Dict[int, tuple]:
        """Comparable view of every token's mutable state."""
        return {
            token.token_id: (token.position, token.movable, token.reached_end)
            for token in self._tokens
        }

    def __getitem__(self, token_id: int) -> Token:
        return self._tokens[token_id]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)
