"""
Token race - a two-player race game with an exhaustive game tree search.

Packages:
- game: board, tokens, players and game state
- search: depth-first exploration and replay logging
- session: turn handling for human and computer players
- cli: the token-race command line tool
"""

__version__ = "0.1.0"
