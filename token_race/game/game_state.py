"""Game state: the board, both players and turn order."""

from typing import List, Optional, Tuple
import logging

from .constants import PlayerId, Position, MIN_BOARD_SIZE, DEFAULT_BOARD_SIZE, max_tokens_for
from .board import Board
from .player import Player
from .types import MoveStep

# Setup logger
logger = logging.getLogger(__name__)


class GameState:
    """Represents the complete state of a token race game."""

    def __init__(self, board_size: int = DEFAULT_BOARD_SIZE, place_tokens: bool = True):
        """Initialize a new game state.

        Args:
            board_size: Width and height of the square board (at least 3).
            place_tokens: Whether to create the starting tokens. Copies
                skip this and take their tokens from the source state.
        """
        if board_size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {board_size}")

        self.board_size = board_size
        self.max_tokens_per_player = max_tokens_for(board_size)
        self.board = Board(board_size, board_size)
        self.players: Tuple[Player, Player] = (
            Player(PlayerId.FIRST, self.max_tokens_per_player, self.board.arena),
            Player(PlayerId.SECOND, self.max_tokens_per_player, self.board.arena),
        )
        self.current_player = PlayerId.FIRST

        if place_tokens:
            self._initialize_tokens()

    def _initialize_tokens(self):
        """Create both players' tokens along their starting edges."""
        first, second = self.players
        for i in range(self.max_tokens_per_player):
            token1 = self.board.arena.spawn(Position(0, i + 1), PlayerId.FIRST)
            token2 = self.board.arena.spawn(Position(i + 1, 0), PlayerId.SECOND)

            first.add_token(token1)
            second.add_token(token2)

            self.board.place_token(token1)
            self.board.place_token(token2)

        self.board.update_token_move_status()
        for player in self.players:
            player.update_movable_tokens()

    def copy_from(self, source: 'GameState') -> None:
        """Copy state from another GameState, sharing no board or token storage."""
        self.board_size = source.board_size
        self.max_tokens_per_player = source.max_tokens_per_player
        self.board = source.board.copy()
        self.players = tuple(player.copy(self.board.arena) for player in source.players)
        self.current_player = source.current_player

    def copy(self) -> 'GameState':
        """Create a deep copy of the game state."""
        new_state = GameState(self.board_size, place_tokens=False)
        new_state.copy_from(self)
        return new_state

    def get_player(self, number: PlayerId) -> Player:
        return self.players[int(number)]

    def get_current_player(self) -> Player:
        return self.players[int(self.current_player)]

    def get_other_player(self) -> Player:
        return self.players[int(self.current_player.opponent)]

    def switch_player(self):
        """Switch the current player."""
        self.current_player = self.current_player.opponent

    def apply_move(self, source: Position, destination: Position) -> Position:
        """Move a token and update both players' bookkeeping.

        Returns the landing cell of the moved token.
        """
        landing = self.board.move_validated(source, destination)

        # A move can block or unblock tokens of either side
        for player in self.players:
            player.update_movable_tokens()

        token = self.board.token_at(landing)
        if token is not None and token.reached_end and not token.scored:
            token.scored = True
            mover = self.get_current_player()
            mover.score += 1
            logger.info(f"{mover.number.name} scores with token {token.token_id} "
                        f"({mover.score}/{mover.max_tokens})")

        return landing

    def is_winning_state(self, number: PlayerId) -> bool:
        """Check if every token of a player sits on its far edge."""
        far_edge = self.board_size - 1
        return all(
            token.position.forward_coordinate(number) == far_edge
            for token in self.get_player(number).tokens
        )

    def get_winner(self) -> Optional[PlayerId]:
        """Get the winner by score, if any."""
        for player in self.players:
            if player.has_won():
                return player.number
        return None

    def legal_moves(self, number: PlayerId) -> List[MoveStep]:
        """One move per movable token of a player that has a landing cell."""
        moves = []
        for token in self.get_player(number).tokens:
            if not token.movable:
                continue
            landing = self.board.token_move(token.position, token.position.step(number.direction))
            if landing is not None:
                moves.append(MoveStep(source=token.position, destination=landing, player=number))
        return moves

    def __str__(self) -> str:
        first, second = self.players
        return (
            f"Token Race State:\n"
            f"Current Player: {self.current_player.name}\n"
            f"Score - {first.number.name}: {first.score}/{first.max_tokens}, "
            f"{second.number.name}: {second.score}/{second.max_tokens}\n"
            f"Board:\n{self.board}"
        )
