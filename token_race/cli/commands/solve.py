"""
Solve command for running the search on a position.
"""

import click
import numpy as np
from typing import List, Optional

from ...game.constants import PlayerId
from ...game.errors import TokenRaceError
from ...game.game_state import GameState
from ...search.explorer import GameTreeExplorer
from ..config import get_config
from ..utils import (
    parse_move,
    render_board,
    render_replay,
    format_success_message,
    handle_error,
    verbose_echo,
)
from .play import resolve_board_size


@click.command()
@click.option('--size', '-s', type=int, help='Full board size (at least 3)')
@click.option('--interior', '-i', type=int, help='Interior size; the board adds one edge line per side')
@click.option('--opening', '-m', multiple=True,
              help="Move to play before searching, as 'x,y:x,y' (repeatable; turns alternate)")
@click.option('--player', type=click.Choice(['0', '1']),
              help='Player to move at the root (default: whoever is next)')
@click.option('--searcher', type=click.Choice(['0', '1']),
              help='Player whose win settles the search (default: the player to move)')
@click.option('--max-depth', type=click.IntRange(min=0), help='Stop exploring after this many plies')
@click.option('--show-replay', is_flag=True, help='Print the board after every explored step')
@click.option('--save-replay', type=click.Path(dir_okay=False),
              help='Write the replay steps to a .npy file (rows of sx, sy, dx, dy, player)')
@click.option('--limit', type=int, default=50, show_default=True,
              help='Maximum replay steps to print')
@click.pass_context
def solve(ctx, size: Optional[int], interior: Optional[int], opening: List[str],
          player: Optional[str], searcher: Optional[str], max_depth: Optional[int],
          show_replay: bool, save_replay: Optional[str], limit: int):
    """
    Search a position and report the move the computer would play.

    \b
    Examples:
        token-race solve --size 3
        token-race solve --size 3 --opening 0,1:1,1
        token-race solve --size 4 --searcher 1 --show-replay --limit 20
        token-race solve --size 4 --save-replay replay.npy
    """
    config = get_config()
    verbose = config.get('verbose', False)
    use_color = config.get('color_output', True)
    if max_depth is None:
        max_depth = config.get('max_depth')

    try:
        state = GameState(resolve_board_size(size, interior))
        for text in opening:
            source, destination = parse_move(text)
            landing = state.apply_move(source, destination)
            verbose_echo(f"Opening {state.current_player.name}: {source} -> {landing}")
            state.switch_player()

        to_move = PlayerId(int(player)) if player is not None else state.current_player
        searching = PlayerId(int(searcher)) if searcher is not None else to_move

        click.echo(render_board(state.board, use_color))
        result = GameTreeExplorer(max_depth=max_depth).search(state, to_move, searching)
    except (TokenRaceError, ValueError) as e:
        handle_error(e, verbose, context="search setup")
        ctx.exit(1)
        return

    details = {
        "To move": to_move.name,
        "Searching for": searching.name,
        "Outcome": result.outcome.value,
        "Winning line found": "yes" if result.is_proven_win else "no",
        "Move": str(result.move) if result.move else "none",
        "Line": " | ".join(str(step) for step in result.history) or None,
        "Nodes explored": result.nodes_explored,
        "Replay steps": len(result.replay),
        "Elapsed": f"{result.elapsed:.3f}s",
    }
    click.echo(format_success_message("Search complete", details))

    if show_replay:
        click.echo("")
        click.echo(render_replay(result.replay, state.board, use_color, limit=limit))

    if save_replay:
        np.save(save_replay, result.replay.to_array())
        click.echo(format_success_message("Replay saved", {"File": save_replay}))
