"""
Utility functions for the token race CLI.

Provides board rendering, position parsing, and message helpers.
"""

from typing import Any, Dict, Optional, Tuple
import click
import numpy as np

from ..game.board import Board
from ..game.constants import PlayerId, Position
from ..search.replay import ReplayLog
from .config import get_config

PLAYER_COLORS = {
    PlayerId.FIRST: 'red',
    PlayerId.SECOND: 'green',
}


def parse_position(text: str) -> Position:
    """Parse 'x,y' (or 'x y') into a Position."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise click.BadParameter(f"Expected a position like '0,1', got '{text}'")
    try:
        return Position(int(parts[0]), int(parts[1]))
    except ValueError:
        raise click.BadParameter(f"Positions are two integers, got '{text}'")


def parse_move(text: str) -> Tuple[Position, Position]:
    """Parse 'x,y:x,y' into a (source, destination) pair."""
    if ':' not in text:
        raise click.BadParameter(f"Expected a move like '0,1:1,1', got '{text}'")
    source, destination = text.split(':', 1)
    return parse_position(source), parse_position(destination)


def render_board(board: Board, use_color: bool = True) -> str:
    """Render the board with column and row indices."""
    lines = ["   " + " ".join(str(x) for x in range(board.width))]
    for y in range(board.height):
        cells = []
        for x in range(board.width):
            token = board.token_at(Position(x, y))
            if token is None:
                cells.append(".")
                continue
            symbol = str(int(token.owner))
            if use_color:
                symbol = click.style(symbol, fg=PLAYER_COLORS[token.owner], bold=token.reached_end)
            cells.append(symbol)
        lines.append(f"{y:2d} " + " ".join(cells))
    return "\n".join(lines)


def render_planes(planes: np.ndarray, use_color: bool = True) -> str:
    """Render a (2, height, width) board plane stack, as produced by Board.to_numpy_array."""
    _, height, width = planes.shape
    lines = ["   " + " ".join(str(x) for x in range(width))]
    for y in range(height):
        cells = []
        for x in range(width):
            owners = np.flatnonzero(planes[:, y, x])
            if owners.size == 0:
                cells.append(".")
                continue
            owner = PlayerId(int(owners[0]))
            symbol = str(int(owner))
            if use_color:
                symbol = click.style(symbol, fg=PLAYER_COLORS[owner])
            cells.append(symbol)
        lines.append(f"{y:2d} " + " ".join(cells))
    return "\n".join(lines)


def render_replay(replay: ReplayLog, board: Board, use_color: bool = True,
                  limit: Optional[int] = None) -> str:
    """Render each replay step followed by the board it produces."""
    blocks = []
    for index, (step, working) in enumerate(replay.boards(board)):
        if limit is not None and index >= limit:
            blocks.append(f"... {len(replay) - limit} more steps")
            break
        blocks.append(f"[{index + 1}] {step}\n{render_board(working, use_color)}")
    return "\n\n".join(blocks)


def format_success_message(message: str, details: Dict[str, Any] = None) -> str:
    """Format a consistent success message with optional details."""
    lines = [click.style(f"✓ {message}", fg='green')]

    if details:
        for key, value in details.items():
            if value is not None:
                lines.append(f"  {key}: {value}")

    return "\n".join(lines)


def handle_error(error: Exception, verbose: bool = False, context: str = None) -> None:
    """Display an error with optional context and traceback."""
    click.echo(click.style(f"✗ Error: {error}", fg='red'), err=True)

    if context:
        click.echo(f"  Context: {context}", err=True)

    if verbose:
        click.echo(click.style("\nDetailed traceback:", fg='cyan'), err=True)
        import traceback
        click.echo(traceback.format_exc(), err=True)
    else:
        click.echo("\nUse --verbose for detailed error information", err=True)


def verbose_echo(message: str, **kwargs):
    """Echo message only in verbose mode."""
    config = get_config()
    if config.get('verbose', False):
        click.echo(message, **kwargs)


def quiet_echo(message: str, **kwargs):
    """Echo message unless in quiet mode."""
    config = get_config()
    if not config.get('quiet', False):
        click.echo(message, **kwargs)
