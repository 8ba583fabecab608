"""
Session - Turn management for human and computer players.
"""

from .game_session import GameSession

__all__ = [
    "GameSession",
]
