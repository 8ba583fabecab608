"""
Search - Game tree exploration for the computer player.

Provides:
- GameTreeExplorer: depth-first search with backtracking
- SearchResult: outcome, committed move, undo-history and replay log
- ReplayLog: every trial move, forward and reverse, for animation
"""

from .replay import ReplayLog
from .explorer import GameTreeExplorer, SearchResult, request_computer_move

__all__ = [
    "ReplayLog",
    "GameTreeExplorer",
    "SearchResult",
    "request_computer_move",
]
