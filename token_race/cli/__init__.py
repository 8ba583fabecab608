"""
CLI interface for token race.

Provides command-line tools for:
- Playing a game against the computer
- Solving a position and inspecting the explored replay
- Benchmarking the search across board sizes
"""

__version__ = "0.1.0"

__all__ = ['cli']

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == 'cli':
        from .main import cli
        return cli
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
