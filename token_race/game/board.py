"""Core game logic for the token race board."""

from typing import Dict, Iterator, Optional
import numpy as np
import logging

from .constants import Position
from .errors import BoardError, InvalidPosition, EmptySource, Immovable, BlockedJump
from .token import Token, TokenArena

# Setup logger
logger = logging.getLogger(__name__)


class Board:
    """Represents the grid and the tokens registered on it."""

    def __init__(self, width: int, height: int, arena: Optional[TokenArena] = None):
        self.width = width
        self.height = height
        # Tokens live in the arena; cells only hold token ids
        self.arena = arena if arena is not None else TokenArena()
        self.cells: Dict[Position, int] = {}

    def copy(self) -> 'Board':
        """Create a deep copy of the board, tokens included."""
        new_board = Board(self.width, self.height, self.arena.copy())
        new_board.cells = self.cells.copy()
        return new_board

    def is_valid_position(self, pos: Position) -> bool:
        """Check if a position lies inside the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_edge(self, pos: Position) -> bool:
        """Check if a position is on the outer boundary."""
        return (pos.x in (0, self.width - 1)) or (pos.y in (0, self.height - 1))

    def is_empty(self, pos: Position) -> bool:
        """Check if a position is valid and holds no token."""
        return self.is_valid_position(pos) and pos not in self.cells

    def place_token(self, token: Token):
        """Register a token on the board at its current position."""
        if not self.is_valid_position(token.position):
            raise InvalidPosition(f"Invalid token position {token.position}")
        if token.position in self.cells:
            raise BoardError(f"Cell {token.position} is already occupied")
        self.cells[token.position] = token.token_id

    def token_at(self, pos: Position) -> Optional[Token]:
        """Get the token at a position, or None if empty or off the board."""
        token_id = self.cells.get(pos)
        if token_id is None:
            return None
        return self.arena[token_id]

    def tokens(self) -> Iterator[Token]:
        """Iterate over every token registered on the board."""
        for token_id in self.cells.values():
            yield self.arena[token_id]

    def token_move(self, source: Position, destination: Position) -> Optional[Position]:
        """Resolve where a move toward `destination` would land.

        Returns `destination` when it is empty, the cell behind it when the
        token can jump the blocker, and None when the move is impossible.
        Never raises.
        """
        if not self.is_valid_position(source) or not self.is_valid_position(destination):
            return None

        token = self.token_at(source)
        if token is None or not token.movable:
            return None

        if destination not in self.cells:
            return destination

        jump = destination.step(token.owner.direction)
        if self.is_empty(jump):
            return jump
        return None

    def can_move(self, token: Token) -> bool:
        """Check if a token has a legal forward move from where it stands."""
        if token.reached_end or not self.is_valid_position(token.position):
            return False

        direction = token.owner.direction
        one_step = token.position.step(direction)
        if not self.is_valid_position(one_step):
            return False
        if one_step not in self.cells:
            return True

        # Blocked, so check the jump
        return self.is_empty(token.position.step(direction, 2))

    def update_token_move_status(self):
        """Refresh the movable flag of every token on the board."""
        for token in self.tokens():
            token.movable = self.can_move(token)

    def move_raw(self, source: Position, destination: Position):
        """Move the token at `source` to `destination` without legality checks.

        Used by the search for speculative moves and their exact undo.
        """
        if not self.is_valid_position(source) or not self.is_valid_position(destination):
            raise InvalidPosition(f"Move coordinates out of bounds: {source} -> {destination}")

        token = self.token_at(source)
        if token is None:
            raise EmptySource(f"No token at source position {source}")

        self._relocate(token, source, destination)

    def move_validated(self, source: Position, destination: Position) -> Position:
        """Move a token with full validation and jump handling.

        Returns the cell the token landed on, which differs from
        `destination` when the move jumps a blocker.
        """
        logger.debug(f"Validated move from {source} to {destination}")
        if not self.is_valid_position(source) or not self.is_valid_position(destination):
            raise InvalidPosition(f"Move coordinates out of bounds: {source} -> {destination}")

        token = self.token_at(source)
        if token is None:
            raise EmptySource(f"No token at source position {source}")
        if not token.movable:
            raise Immovable(f"Token at {source} is immovable")

        direction = token.owner.direction
        one_step = source.step(direction)
        jump = source.step(direction, 2)

        landing = destination
        if destination == one_step:
            if destination in self.cells:
                # Jump over the blocking token
                if not self.is_empty(jump):
                    raise BlockedJump(f"Can't jump from {source} over {destination}")
                landing = jump
        elif destination == jump:
            # Landing cell given directly; only valid when there is something to jump
            if one_step not in self.cells:
                raise InvalidPosition(f"{destination} is not reachable from {source}")
            if destination in self.cells:
                raise BlockedJump(f"Can't jump from {source} over {one_step}")
        else:
            raise InvalidPosition(f"{destination} is not a forward move from {source}")

        self._relocate(token, source, landing)
        return landing

    def _relocate(self, token: Token, source: Position, destination: Position):
        """Shared move bookkeeping for raw and validated moves."""
        forward = (destination.forward_coordinate(token.owner)
                   > source.forward_coordinate(token.owner))

        del self.cells[source]
        self.cells[destination] = token.token_id
        token.position = destination
        token.clear_reached_end()
        self.update_token_move_status()

        # Only arrival in the owner's direction counts as reaching the end
        if forward and self.is_edge(destination):
            token.mark_reached_end()
            logger.debug(f"Token {token.token_id} reached the end at {destination}")

    def to_numpy_array(self) -> np.ndarray:
        """Convert board state to numpy array, one channel per player."""
        state = np.zeros((2, self.height, self.width), dtype=np.float32)
        for pos, token_id in self.cells.items():
            state[int(self.arena[token_id].owner), pos.y, pos.x] = 1
        return state

    def __str__(self) -> str:
        """Return string representation of the board."""
        result = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                token = self.token_at(Position(x, y))
                row.append(str(int(token.owner)) if token else ".")
            result.append(" ".join(row))
        return "\n".join(result)
