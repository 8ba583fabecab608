"""Player bookkeeping: owned tokens, score and movable count."""

from typing import List

from .constants import PlayerId
from .errors import CapacityExceeded
from .token import Token, TokenArena


class Player:
    """One side of the game, holding a fixed quota of tokens."""

    def __init__(self, number: PlayerId, max_tokens: int, arena: TokenArena):
        self.number = PlayerId(number)
        self.max_tokens = max_tokens
        self.arena = arena
        self.token_ids: List[int] = []
        self.score = 0
        self.movable_tokens = max_tokens

    def copy(self, arena: TokenArena) -> 'Player':
        """Copy this player onto another arena holding the same token ids."""
        new_player = Player(self.number, self.max_tokens, arena)
        new_player.token_ids = list(self.token_ids)
        new_player.score = self.score
        new_player.movable_tokens = self.movable_tokens
        return new_player

    def add_token(self, token: Token):
        """Add a token to the player's collection."""
        if len(self.token_ids) >= self.max_tokens:
            raise CapacityExceeded(
                f"Cannot add more tokens: {self.number.name} already holds {self.max_tokens}"
            )
        self.token_ids.append(token.token_id)

    @property
    def tokens(self) -> List[Token]:
        return [self.arena[token_id] for token_id in self.token_ids]

    @property
    def token_count(self) -> int:
        return len(self.token_ids)

    def has_movable_tokens(self) -> bool:
        return any(token.movable for token in self.tokens)

    def update_movable_tokens(self):
        """Recount movable tokens from flags the board already refreshed."""
        self.movable_tokens = sum(1 for token in self.tokens if token.movable)

    def has_won(self) -> bool:
        return self.score >= self.max_tokens

    def __repr__(self) -> str:
        return (f"Player({self.number.name}, tokens={self.token_count}/{self.max_tokens}, "
                f"score={self.score}, movable={self.movable_tokens})")
