"""
Command modules for the token race CLI.
"""

from . import play
from . import solve
from . import bench

__all__ = ['play', 'solve', 'bench']
