"""Exceptions raised by the board and players."""


class TokenRaceError(Exception):
    """Base exception for token race game errors."""
    pass


class BoardError(TokenRaceError):
    """Raised when a board operation cannot be carried out."""
    pass


class InvalidPosition(BoardError):
    """Raised when a position lies outside the grid."""
    pass


class EmptySource(BoardError):
    """Raised when there is no token at the origin of a move."""
    pass


class Immovable(BoardError):
    """Raised when the token at the origin is blocked or has already scored."""
    pass


class BlockedJump(BoardError):
    """Raised when the cell behind a blocking token is occupied or off the board."""
    pass


class CapacityExceeded(TokenRaceError):
    """Raised when a player already holds all of its tokens."""
    pass
